"""Rule sets for the inputs produced by the fixture generators."""

from __future__ import annotations

from .rules import RuleScanner, TokenRule

_JS_KEYWORDS = (
    "function", "const", "let", "var", "if", "else", "while", "for",
    "return", "import", "export", "class", "extends",
)


def words_scanner() -> RuleScanner:
    return RuleScanner(
        [
            TokenRule("WORD", r"\w+"),
            TokenRule("WS", r"\s+", skip=True),
        ],
        name="words",
    )


def json_scanner() -> RuleScanner:
    return RuleScanner(
        [
            TokenRule("LBRACE", r"\{", priority=20),
            TokenRule("RBRACE", r"\}", priority=20),
            TokenRule("LBRACKET", r"\[", priority=20),
            TokenRule("RBRACKET", r"\]", priority=20),
            TokenRule("COMMA", r",", priority=20),
            TokenRule("COLON", r":", priority=20),
            TokenRule("TRUE", r"true", priority=15),
            TokenRule("FALSE", r"false", priority=15),
            TokenRule("NULL", r"null", priority=15),
            TokenRule("STRING", r'"(?:[^"\\]|\\.)*"', priority=10),
            TokenRule("NUMBER", r"-?(?:0|[1-9]\d*)(?:\.\d+)?(?:[eE][+-]?\d+)?", priority=10),
            TokenRule("WS", r"\s+", priority=1, skip=True),
        ],
        name="json",
    )


def javascript_scanner() -> RuleScanner:
    rules = [TokenRule(keyword.upper(), rf"{keyword}\b", priority=25) for keyword in _JS_KEYWORDS]
    rules += [
        TokenRule("ARROW", r"=>", priority=20),
        TokenRule("EQ", r"===?", priority=20),
        TokenRule("NE", r"!==?", priority=20),
        TokenRule("LE", r"<=", priority=20),
        TokenRule("GE", r">=", priority=20),
        TokenRule("AND", r"&&", priority=20),
        TokenRule("OR", r"\|\|", priority=20),
        TokenRule("SPREAD", r"\.\.\.", priority=20),
        TokenRule("PUNCT", r"[-+*/%=<>!(){}\[\];,.:?]", priority=15),
        TokenRule("NUMBER", r"\d+(?:\.\d+)?", priority=10),
        TokenRule("STRING", r"'(?:[^'\\]|\\.)*'|\"(?:[^\"\\]|\\.)*\"|`[^`]*`", priority=10),
        TokenRule("IDENTIFIER", r"[A-Za-z_$][A-Za-z0-9_$]*", priority=5),
        TokenRule("COMMENT", r"//[^\n]*", priority=30, skip=True),
        TokenRule("WS", r"\s+", priority=1, skip=True),
    ]
    return RuleScanner(rules, name="javascript")


def scaling_scanner() -> RuleScanner:
    return RuleScanner(
        [
            TokenRule("KEYWORD", r"(?:if|then|else|while|for|let)\b", priority=10),
            TokenRule("IDENTIFIER", r"[A-Za-z_]\w*", priority=5),
            TokenRule("NUMBER", r"\d+", priority=5),
            TokenRule("PUNCT", r"[-+=(){};]", priority=5),
            TokenRule("WS", r"\s+", priority=1, skip=True),
        ],
        name="scaling",
    )


PRESETS = {
    "words": words_scanner,
    "json": json_scanner,
    "javascript": javascript_scanner,
    "scaling": scaling_scanner,
}

__all__ = ["PRESETS", "javascript_scanner", "json_scanner", "scaling_scanner", "words_scanner"]
