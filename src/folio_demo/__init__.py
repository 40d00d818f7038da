"""Demo portfolio data for trying out the CLI."""

from folio_demo.builder import (
    build_demo_account,
    build_demo_securities,
    build_demo_taxonomy,
)

__all__ = ["build_demo_account", "build_demo_securities", "build_demo_taxonomy"]
