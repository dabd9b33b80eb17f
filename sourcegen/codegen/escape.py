import re

from sourcegen.codegen.instrumentation import trace_operation


# Whitespace and other control characters, plus backslash, mapped to their
# escape sequences.
ESCAPE_MAP = {
    '\b': r'\b',    # 08 - backspace
    '\t': r'\t',    # 09 - tab
    '\n': r'\n',    # 0A - new line
    '\v': r'\v',    # 0B - vertical tab
    '\f': r'\f',    # 0C - form feed
    '\r': r'\r',    # 0D - carriage return
    '\x7F': r'\x7F',  # delete
    '\\': r'\\',    # backslash
}

# Characters that only need escaping depending on the surrounding quotes.
QUOTE_SENSITIVE = ("'", '"', '$')


def _get_hex_literal(char):
    """Return the hex escape of a single character, e.g. `\\x1F`."""
    return '\\x{:02X}'.format(ord(char))


_ESCAPE_REGEX = re.compile(
    '[$\'"\\x00-\\x07\\x0E-\\x1F' +
    ''.join(_get_hex_literal(c) for c in ESCAPE_MAP) + ']')

# Zero-width match in front of every `$`, `'` and `"`.
_DOLLAR_QUOTE_REGEX = re.compile(r"""(?=[$'"])""")


@trace_operation(param_names=['value'])
def escape_string_literal(value: str) -> str:
    """
    Return a quoted string literal for `value` that can be used in
    generated code.

    The shortest safe form is picked:

        plain        -> 'plain'
        it's         -> "it's"
        $price       -> r'$price'
        it's $5      -> r"it's $5"
        'a' "b"      -> '\\'a\\' \\"b\\"'
    """
    has_single_quote = False
    has_double_quote = False
    has_dollar = False
    can_be_raw = True

    def escape(match):
        nonlocal has_single_quote, has_double_quote, has_dollar, can_be_raw
        char = match.group(0)
        if char == "'":
            has_single_quote = True
            return char
        if char == '"':
            has_double_quote = True
            return char
        if char == '$':
            has_dollar = True
            return char

        can_be_raw = False
        return ESCAPE_MAP.get(char) or _get_hex_literal(char)

    value = _ESCAPE_REGEX.sub(escape, value)

    if not has_dollar:
        if has_single_quote:
            if not has_double_quote:
                return '"{}"'.format(value)
            # Both quotes: neither can be used unescaped.
        else:
            return "'{}'".format(value)

    if has_dollar and can_be_raw:
        if has_single_quote:
            if not has_double_quote:
                return 'r"{}"'.format(value)
        else:
            return "r'{}'".format(value)

    # The only safe way left is to escape every `$`, `'` and `"`.
    return "'{}'".format(_DOLLAR_QUOTE_REGEX.sub(r'\\', value))
