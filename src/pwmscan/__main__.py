"""
--------------------------------------------------------------------------------
<pwmscan project>
pwmscan/__main__.py

`python -m pwmscan` entrypoint.
--------------------------------------------------------------------------------
"""

from __future__ import annotations

from .cli import app

if __name__ == "__main__":
    app()
