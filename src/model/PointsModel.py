from dataclasses import dataclass, field
from typing import List


@dataclass(frozen=True)
class RuleResult:
    rule: str
    points: int
    detail: str = ""


@dataclass
class PointsBreakdown:
    rules: List[RuleResult] = field(default_factory=list)

    @property
    def total(self) -> int:
        return sum(result.points for result in self.rules)

    def add(self, rule: str, points: int, detail: str = "") -> None:
        self.rules.append(RuleResult(rule=rule, points=points, detail=detail))
