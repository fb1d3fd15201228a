"""doublysure constants.

All literals live here. No exceptions.
"""

# Prompt
DEFAULT_QUESTION = "Are you sure?"

# Answers recorded in resolution receipts
ANSWER_YES = "yes"
ANSWER_NO = "no"

# Receipt types
RECEIPT_RESOLUTION = "sure_resolution"

# CLI exit codes
EXIT_DECLINED = 1
EXIT_NOT_RUNNABLE = 127  # Same as a shell's "command not found"
