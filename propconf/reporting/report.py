"""
Problem Report Module.

Collects naming conflicts from a registry and problems from any number of
loader results, and renders them as one report, so a user sees every
configuration mistake at once.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List

import yaml
from loguru import logger

from propconf.load.problems import LoaderProblem
from propconf.load.values import LoaderValues
from propconf.registry.registry import NamingConflict, PropertyRegistry


@dataclass
class ProblemReport:
    """
    Aggregated configuration anomalies.

    Attributes:
        naming_conflicts: Conflicts from every added registry.
        problems: Loader problems, in the order the loader results were added.
    """

    naming_conflicts: List[NamingConflict] = field(default_factory=list)
    problems: List[LoaderProblem] = field(default_factory=list)

    def add_registry(self, registry: PropertyRegistry) -> "ProblemReport":
        self.naming_conflicts.extend(registry.naming_conflicts)
        return self

    def add_loader_values(self, values: LoaderValues) -> "ProblemReport":
        self.problems.extend(values.problems)
        return self

    @property
    def is_empty(self) -> bool:
        return not self.naming_conflicts and not self.problems

    @property
    def count(self) -> int:
        return len(self.naming_conflicts) + len(self.problems)

    def render(self) -> str:
        """Render the report as human-readable text."""
        if self.is_empty:
            return "No configuration problems found."

        lines = [f"{self.count} configuration problem(s) found:"]

        if self.naming_conflicts:
            lines.append("Naming conflicts:")
            for conflict in self.naming_conflicts:
                lines.append(f"  - {conflict.message}")

        by_loader: Dict[str, List[LoaderProblem]] = {}
        for problem in self.problems:
            by_loader.setdefault(problem.loader_name, []).append(problem)

        for loader_name, problems in by_loader.items():
            lines.append(f"Problems from {loader_name}:")
            for problem in problems:
                line = f"  - [{type(problem).__name__}] {problem.message}"
                prop = getattr(problem, "prop", None)
                if prop is not None and prop.description:
                    line += f" ({prop.description})"
                lines.append(line)

        return "\n".join(lines)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize the report to a dictionary."""
        return {
            "problem_count": self.count,
            "naming_conflicts": [c.to_dict() for c in self.naming_conflicts],
            "problems": [
                dict(p.to_dict(), loader=p.loader_name) for p in self.problems
            ],
        }

    def to_yaml(self) -> str:
        """Serialize the report to YAML."""
        return yaml.safe_dump(self.to_dict(), sort_keys=False)

    def log(self) -> None:
        """Write the report to the log: one warning per anomaly."""
        if self.is_empty:
            logger.info("No configuration problems found")
            return
        for conflict in self.naming_conflicts:
            logger.warning(f"Naming conflict: {conflict.message}")
        for problem in self.problems:
            logger.warning(f"[{problem.loader_name}] {problem.message}")
