"""Collections of time-varying values."""

from __future__ import annotations

from chronoline.collections.timeline import Timeline

__all__: list[str] = ["Timeline"]
