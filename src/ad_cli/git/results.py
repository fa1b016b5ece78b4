"""Per-target outcomes and the end-of-run tally."""

from dataclasses import dataclass, field


@dataclass
class OperationResult:
    """Outcome of one pull or sync target."""

    target: str
    ok: bool
    message: str = ""


@dataclass
class OperationSummary:
    """Ordered results of a batch, in the order targets were processed."""

    results: list[OperationResult] = field(default_factory=list)

    def add(self, result: OperationResult) -> OperationResult:
        self.results.append(result)
        return result

    @property
    def total(self) -> int:
        return len(self.results)

    @property
    def succeeded(self) -> int:
        return sum(1 for r in self.results if r.ok)

    @property
    def failed(self) -> list[str]:
        return [r.target for r in self.results if not r.ok]

    @property
    def passed(self) -> bool:
        return not self.failed

    def tally(self) -> str:
        return f"{self.succeeded}/{self.total}"
