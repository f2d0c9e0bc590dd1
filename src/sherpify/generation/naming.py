from __future__ import annotations

import keyword

COMMON_INITIALISMS = frozenset(
    {
        "ACL",
        "API",
        "ASCII",
        "CPU",
        "CSS",
        "DNS",
        "EOF",
        "GUID",
        "HTML",
        "HTTP",
        "HTTPS",
        "ID",
        "IP",
        "JSON",
        "LHS",
        "QPS",
        "RAM",
        "RHS",
        "RPC",
        "SLA",
        "SMTP",
        "SQL",
        "SSH",
        "TCP",
        "TLS",
        "TTL",
        "UDP",
        "UI",
        "UID",
        "UUID",
        "URI",
        "URL",
        "UTF8",
        "VM",
        "XML",
        "XMPP",
        "XSRF",
        "XSS",
    }
)


def exported_name(name: str) -> str:
    """Name for classes, dataclass fields and enum members.

    Example:
        >>> exported_name("itemId")
        'ItemID'
        >>> exported_name("urlPath")
        'URLPath'
    """
    _require(name)
    return python_safe(lint_name(name[0].upper() + name[1:]))


def local_name(name: str) -> str:
    """Name for methods and parameters.

    Example:
        >>> local_name("GetItem")
        'getItem'
    """
    _require(name)
    return python_safe(name[0].lower() + name[1:])


def python_safe(name: str) -> str:
    """Append an underscore to names that are Python keywords."""
    if keyword.iskeyword(name):
        return name + "_"
    return name


def lint_name(name: str) -> str:
    """Normalize known initialisms in a camel case name.

    The name is split into words at every lower-to-non-lower case change
    and at underscores. Words that spell a known initialism are written in
    upper case (lower case when they start the name in lower case), other
    all-lower words after the first get an upper-case first letter.
    Underscores are dropped, except a single one between two digits.
    """
    if name == "_":
        return name
    if all(ch.islower() for ch in name):
        return name

    runes = list(name)
    start = 0
    i = 0
    while i < len(runes):
        end_of_word = False
        if i + 1 == len(runes):
            end_of_word = True
        elif runes[i + 1] == "_":
            end_of_word = True
            n = 1
            while i + n + 1 < len(runes) and runes[i + n + 1] == "_":
                n += 1
            if i + n + 1 < len(runes) and runes[i].isdigit() and runes[i + n + 1].isdigit():
                n -= 1
            del runes[i + 1 : i + 1 + n]
        elif runes[i].islower() and not runes[i + 1].islower():
            end_of_word = True
        i += 1
        if not end_of_word:
            continue

        word = "".join(runes[start:i])
        upper = word.upper()
        if upper in COMMON_INITIALISMS:
            if start == 0 and runes[start].islower():
                upper = upper.lower()
            runes[start:i] = list(upper)
        elif start > 0 and word.lower() == word:
            runes[start] = runes[start].upper()
        start = i
    return "".join(runes)


def _require(name: str) -> None:
    if not name:
        raise ValueError("cannot derive an identifier from an empty name")
