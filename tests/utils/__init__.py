# tests/utils/__init__.py

from .constants import DEFAULT_TEST_LOG_LEVEL, PROJ_ROOT
from .project import (
    DEFAULT_REDIRECTS,
    DEFAULT_ROUTES,
    make_environ,
    make_layout,
    write_project,
)


__all__ = [  # noqa: RUF022
    # constants
    "DEFAULT_TEST_LOG_LEVEL",
    "PROJ_ROOT",
    # project
    "DEFAULT_REDIRECTS",
    "DEFAULT_ROUTES",
    "make_environ",
    "make_layout",
    "write_project",
]
