"""
Decision tables for the plan stages.

A table is an ordered tuple of Rule(when, then) pairs. Two ways to read one:
  first_match — a decision list, the first rule whose predicate holds wins
  all_matches — every rule whose predicate holds contributes, in table order
"""

from dataclasses import dataclass
from typing import Callable, Generic, Sequence, TypeVar

from skinplan.schemas import SurveyResponse

T = TypeVar("T")

Predicate = Callable[[SurveyResponse], bool]


@dataclass(frozen=True)
class Rule(Generic[T]):
    when: Predicate
    then: T


def first_match(rules: Sequence[Rule[T]], survey: SurveyResponse, default: T) -> T:
    for rule in rules:
        if rule.when(survey):
            return rule.then
    return default


def all_matches(rules: Sequence[Rule[T]], survey: SurveyResponse) -> list[T]:
    return [rule.then for rule in rules if rule.when(survey)]
