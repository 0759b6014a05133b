"""PrattCalc package: tokenizer, precedence-climbing parser, expression tree and CLI."""

__all__ = [
    "config",
    "tokens",
    "operators",
    "lexer",
    "expression",
    "parser",
    "algebra",
    "symbolic",
    "sampling",
    "types",
    "api",
    "cli",
    "logging_config",
]

# Public API exports

__api_exports__ = [
    "parse",
    "evaluate",
    "validate_expression",
    "simplify",
    "tabulate",
    "make_assignment_map",
]
