"""Cumulative statistics for a single extidy run."""

from dataclasses import dataclass
from typing import List


@dataclass
class RunStats:
    """Holds cumulative counts for a single extidy run."""

    # Edit counts by rewrite
    blocks_unwrapped: int = 0
    assignments_folded: int = 0
    returns_folded: int = 0
    # Source declarations absorbed into a merged declaration
    declarations_merged: int = 0

    # Statement counts before and after the pipeline
    statements_in: int = 0
    statements_out: int = 0

    def merge(self, other: "RunStats") -> None:
        """Add all counters from *other* into self."""
        self.blocks_unwrapped += other.blocks_unwrapped
        self.assignments_folded += other.assignments_folded
        self.returns_folded += other.returns_folded
        self.declarations_merged += other.declarations_merged
        self.statements_in += other.statements_in
        self.statements_out += other.statements_out

    @property
    def total_edits(self) -> int:
        return (
            self.blocks_unwrapped
            + self.assignments_folded
            + self.returns_folded
            + self.declarations_merged
        )

    def format_summary(self) -> List[str]:
        """Return a list of lines forming the human-readable run summary."""
        lines = ["--- extidy summary ---"]
        lines.append("edits:")
        lines.append(f"  blocks unwrapped:    {self.blocks_unwrapped}")
        lines.append(f"  assignments folded:  {self.assignments_folded}")
        lines.append(f"  returns folded:      {self.returns_folded}")
        lines.append(f"  declarations merged: {self.declarations_merged}")
        lines.append(f"  total:               {self.total_edits}")
        lines.append(
            f"statements: {self.statements_in} in, {self.statements_out} out"
        )
        return lines
