"""Root conftest: ensure this checkout's src/ is first on sys.path.

Lets the tests import fancyfont_mcp from a plain clone without an
editable install, and keeps a stale installed copy from shadowing it.
"""

import pathlib
import sys

_src = str(pathlib.Path(__file__).resolve().parent / "src")
if _src not in sys.path:
    sys.path.insert(0, _src)
