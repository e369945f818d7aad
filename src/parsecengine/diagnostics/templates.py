"""Error message templates.

Centralized message templates for testable, consistent diagnostics.
Python 3.13+. Zero external dependencies.
"""


class ErrorTemplate:
    """Centralized error message templates.

    All messages are created here. NO f-strings in exception constructors!
    Two families live side by side:
        - Combinator failure messages: short, combinator-named strings carried
          by Error outcomes. Meant for debugging, not for end users.
        - Exception messages: raised at the API boundary (run/parse) or on
          misuse of a constructor.
    """

    # =========================================================================
    # COMBINATOR FAILURE MESSAGES
    # =========================================================================

    @staticmethod
    def literal_mismatch(expected: str) -> str:
        """Input does not start with the expected literal.

        Args:
            expected: The literal that was expected

        Returns:
            Message naming the literal, e.g. 'string("def")'
        """
        return f'string("{expected}")'

    @staticmethod
    def string_while() -> str:
        """No leading character satisfied a run predicate."""
        return "string while"

    @staticmethod
    def char_mismatch() -> str:
        """Single character did not match (or input was exhausted)."""
        return "char"

    @staticmethod
    def concat_failed() -> str:
        """A child of a sequence failed."""
        return "concat"

    @staticmethod
    def choose_failed() -> str:
        """Every alternative of an ordered choice failed."""
        return "choose, expecting..."

    @staticmethod
    def times_failed() -> str:
        """Repetition failed during its mandatory phase."""
        return "times"

    @staticmethod
    def eventually_failed() -> str:
        """Skip-until exhausted the input without a match."""
        return "eventually"

    @staticmethod
    def ignore_failed() -> str:
        """The suppressed parser failed."""
        return "ignore"

    @staticmethod
    def tag_failed() -> str:
        """The labeled parser failed."""
        return "tag"

    # =========================================================================
    # EXCEPTION MESSAGES
    # =========================================================================

    @staticmethod
    def unexpected_eof(position: int) -> str:
        """Character access at end of input.

        Args:
            position: The position where EOF was encountered

        Returns:
            Message for EOFError
        """
        return f"Unexpected EOF at position {position}"

    @staticmethod
    def cursor_out_of_range(pos: int, end: int, length: int) -> str:
        """Cursor bounds violate 0 <= pos <= end <= len(source).

        Args:
            pos: Requested start offset
            end: Requested end offset
            length: Length of the backing source

        Returns:
            Message for ValueError
        """
        return (
            f"Cursor range [{pos}, {end}) is invalid for source of length {length}; "
            "require 0 <= pos <= end <= len(source)"
        )

    @staticmethod
    def empty_character_class() -> str:
        """Character class built from an empty string."""
        return "Character class must contain at least one character"

    @staticmethod
    def invalid_char_spec(value: object) -> str:
        """Character-class argument is neither str nor CharClass.

        Args:
            value: The offending argument

        Returns:
            Message for TypeError
        """
        return f"Expected str or CharClass, got {type(value).__name__}"

    @staticmethod
    def invalid_parser(value: object) -> str:
        """Combinator received something that is not callable.

        Args:
            value: The offending argument

        Returns:
            Message for TypeError
        """
        return f"Expected a parser (callable), got {type(value).__name__}"

    @staticmethod
    def invalid_input(value: object) -> str:
        """Entry point received neither str nor Cursor.

        Args:
            value: The offending argument

        Returns:
            Message for TypeError
        """
        return f"Expected str or Cursor input, got {type(value).__name__}"

    @staticmethod
    def input_too_large(size: int, limit: int) -> str:
        """Input exceeds the configured maximum source size.

        Args:
            size: Length of the rejected input
            limit: Configured maximum

        Returns:
            Message for InputTooLargeError
        """
        return f"Input of {size} characters exceeds maximum source size of {limit}"

    @staticmethod
    def invalid_source_limit(limit: int) -> str:
        """Negative maximum source size.

        Args:
            limit: The rejected value

        Returns:
            Message for ValueError
        """
        return f"max_source_size must be >= 0 (0 or None disables the check), got {limit}"

    @staticmethod
    def parse_failed(location: str) -> str:
        """Parser returned an Error outcome at the API boundary.

        Args:
            location: Formatted "line:col: message" of the failure

        Returns:
            Message for ParseFailedError
        """
        return f"Parse failed at {location}"

    @staticmethod
    def incomplete_parse(line: int, col: int, remaining: int) -> str:
        """Parser succeeded but left input unconsumed.

        Args:
            line: Line (1-based) where unconsumed input starts
            col: Column (1-based) where unconsumed input starts
            remaining: Number of unconsumed characters

        Returns:
            Message for IncompleteParseError
        """
        return f"{line}:{col}: Parser stopped with {remaining} unconsumed character(s)"

    @staticmethod
    def depth_exceeded(max_depth: int) -> str:
        """AST traversal exceeded its depth limit.

        Args:
            max_depth: The configured limit

        Returns:
            Message for DepthLimitExceededError
        """
        return f"Maximum AST depth ({max_depth}) exceeded"

    @staticmethod
    def unknown_ast_data(value: object) -> str:
        """Plain data could not be rebuilt into an AST node.

        Args:
            value: The offending value

        Returns:
            Message for TypeError
        """
        return f"Cannot convert {type(value).__name__} to an AST node"
