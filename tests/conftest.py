"""Root conftest.py for test configuration.

Ensures local src/ directory takes priority over any installed packages.
"""

import sys
from pathlib import Path

import pytest

# Insert local src directory at the beginning of sys.path
# This ensures that the local cobolassist package is used, not any installed one
_src_dir = Path(__file__).parent.parent / "src"
if str(_src_dir) not in sys.path:
    sys.path.insert(0, str(_src_dir))

# Force reimport of cobolassist modules if already imported
for module_name in list(sys.modules.keys()):
    if module_name.startswith("cobolassist"):
        del sys.modules[module_name]


SAMPLE_PROGRAM = """\
       IDENTIFICATION DIVISION.
       PROGRAM-ID. SAMPLE.
       DATA DIVISION.
       WORKING-STORAGE SECTION.
       01  WS-TOTAL            PIC 9(7)V99.
       01  WS-NAME             PIC X(30).
       PROCEDURE DIVISION.
      *>/**
      *> Computes the invoice total.
      *>
      *> @param WS-INVOICE invoice being totalled
      *> @return WS-TOTAL
      *>*/
       COMPUTE-TOTAL.
           PERFORM ADD-LINE
           EXIT PARAGRAPH.
      *>-> Adds one invoice line. <-<*
       ADD-LINE.
           ADD 1 TO WS-TOTAL.
       COMPUTE-TOTAL.
           CONTINUE.
"""


@pytest.fixture
def sample_program() -> str:
    """A small program with both documentation dialects and a duplicate paragraph."""
    return SAMPLE_PROGRAM


@pytest.fixture
def sample_file(tmp_path: Path) -> Path:
    path = tmp_path / "SAMPLE.CBL"
    path.write_text(SAMPLE_PROGRAM, encoding="latin-1")
    return path
