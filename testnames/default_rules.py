# Hard defaults for the operator test folder.
DEFAULT_FOLDER_NAME = "operator"
DEFAULT_TESTS_SUBDIR = "tests"
DEFAULT_MAX_WORKERS = 8

# Applied in order: underscores first, then the lox -> lax rename.
DEFAULT_SUBSTITUTIONS = (
    ("_", "-"),
    ("lox", "lax"),
)

PROPERTY_LINE_TEMPLATE = 'set_property(TEST {folder}/{name} PROPERTY PASS_REGULAR_EXPRESSION "")'
