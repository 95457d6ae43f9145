"""Fixed-format layout constants.

This module contains truly constant values that should NOT be user-configurable.
They describe the reserved column areas of fixed-format COBOL source and the
columns the completion snippets align to.

Columns are 1-based, as printed on a coding form. Editor positions are 0-based
characters, so ``column == character + 1``.

For configurable values, see models.py (CompletionConfig, ExpansionConfig).
"""

# =============================================================================
# Reserved Areas
# =============================================================================

SEQUENCE_AREA_WIDTH = 6
"""Columns 1-6: sequence number area. Comment lines carry their marker after it."""

DECLARATION_MARGIN = 7
"""Leading spaces before a paragraph name (sequence area plus indicator column)."""

AREA_A_COLUMN = 8
"""First column of Area A, where paragraph names and level numbers start."""

AREA_B_COLUMN = 12
"""First column of Area B, where first-level statements start."""

# =============================================================================
# Comment Markers
# =============================================================================

COMMENT_MARKER = "*>"
"""Inline comment introducer. Also introduces full comment lines after the margin."""

STRUCTURED_DOC_OPENER = "*>/**"
"""Opens a structured (tagged) documentation block."""

STRUCTURED_DOC_CLOSER = "*>*/"
"""Closes a structured documentation block."""

FREEFORM_DOC_OPENER = "*>->"
"""Starts a single-line freeform documentation comment."""

FREEFORM_DOC_CLOSER = "<-<*"
"""Optional trailing marker of a freeform documentation comment."""

# =============================================================================
# Snippet Target Columns
# =============================================================================

PERFORM_TARGET_COLUMN = 35
"""Column where the paragraph name after PERFORM (and the EXIT object) starts."""

OPERAND_COLUMN = 20
"""Column where the first operand of MOVE and SET starts."""

VALUE_CLAUSE_COLUMN = 51
"""Column where the VALUE clause of a data item starts."""
