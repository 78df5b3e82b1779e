"""
Reporting Module.

Combines naming conflicts and loader problems into a single report
(text, dictionary or YAML).
"""

from propconf.reporting.report import ProblemReport

__all__ = ["ProblemReport"]
