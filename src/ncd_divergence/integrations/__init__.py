"""Integrations subpackage for ncd-divergence.

Contains the pytest plugin (auto-discovered via the pytest11 entry point),
which provides the ``assert_texts_converge`` fixture.
"""

from __future__ import annotations

__all__: list[str] = []
