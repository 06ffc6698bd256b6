"""
String Filtering and Validation Patterns

Regular expression patterns used by the string helpers for character
filtering and email validation.

Pattern Design Principles:
- Compiled once at import time
- Case-insensitive where the grammar is (re IGNORECASE flag)
- Compiled with the third-party `regex` engine, which supports a per-call
  `timeout=` argument; the stdlib `re` module cannot abort a runaway match
"""

import regex


# ============================================================================
# CHARACTER FILTER PATTERNS
# ============================================================================

# Everything that is not an ASCII letter or digit
# Used by: remove_special_chars("a-b_c!1") -> "abc1"
NON_ALPHANUMERIC_PATTERN: regex.Pattern = regex.compile(r"[^a-zA-Z0-9]")

# Everything that is not an ASCII digit
# Used by: to_int("abc123def") -> 123
NON_DIGIT_PATTERN: regex.Pattern = regex.compile(r"[^0-9]")


# ============================================================================
# EMAIL PATTERN
# ============================================================================

# RFC 5322-like email grammar, applied after IDNA-normalizing the domain.
# Must be used with fullmatch() and a timeout.
# Matches: user@example.com, first.last@sub.example.co.uk, "john doe"@example.com,
#          user@[192.168.0.1]
# Rejects: .user@example.com, user.@example.com, user..name@example.com,
#          user@localhost, user@example.c
EMAIL_PATTERN: regex.Pattern = regex.compile(
    r"""
    (?:                                 # LOCAL PART
        "[^\n]+?(?<!\\)"@               #   quoted: "anything" not ending in \"
      |
        [0-9a-z]                        #   unquoted: starts alphanumeric
        (?:
            \.(?!\.)                    #     single dot (no "..")
          | [-!\#$%&'*+/=?^`{}|~\w]     #     allowed symbol or word character
        )*
        (?<=[0-9a-z])@                  #   ends alphanumeric before @
    )
    (?:                                 # DOMAIN PART
        \[(?:\d{1,3}\.){3}\d{1,3}\]     #   bracketed IPv4 literal
      |
        (?:[0-9a-z][-\w]*[0-9a-z]*\.)+  #   one or more labels, dot-terminated
        [a-z0-9][-a-z0-9]{0,22}[a-z0-9] #   TLD, 2-24 characters
    )
    """,
    regex.IGNORECASE | regex.VERBOSE,
)
