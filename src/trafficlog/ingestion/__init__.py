"""Ingestion layer.

Turns raw input lines into structured commands. This is the only place
that validates text; the state layer trusts what it receives.
"""

from trafficlog.ingestion.parser import LineParser, parse_line

__all__ = ["LineParser", "parse_line"]
