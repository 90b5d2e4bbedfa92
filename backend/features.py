import chess


def validate_fen(fen: str) -> tuple[bool, str | None]:
    """Validate a FEN string for correctness.

    Checks that the FEN is parseable by python-chess and that both kings
    are present on the board.

    Args:
        fen: The FEN string to validate.

    Returns:
        A tuple of (is_valid, error_message). If valid, error_message is None.
    """
    try:
        board = chess.Board(fen)
    except ValueError as e:
        return False, f"Invalid FEN format: {e}"

    if board.king(chess.WHITE) is None:
        return False, "Invalid position: White king is missing"
    if board.king(chess.BLACK) is None:
        return False, "Invalid position: Black king is missing"

    return True, None


def load_position(fen: str | None = None) -> chess.Board:
    """Return a board for ``fen`` (the starting position when omitted).

    Raises:
        ValueError: If the FEN fails ``validate_fen``.
    """
    if not fen:
        return chess.Board()
    is_valid, error = validate_fen(fen)
    if not is_valid:
        raise ValueError(error)
    return chess.Board(fen)


def parse_move(board: chess.Board, move_str: str) -> chess.Move:
    """Handle Standard Algebraic Notation (SAN) first, then Universal Chess Interface (UCI).
    SAN for human convenience (CLI and tests), UCI for compatibility with engines and APIs.
    """
    move_str = move_str.strip()
    try:
        return board.parse_san(move_str)
    except ValueError:
        pass
    try:
        return board.parse_uci(move_str)
    except ValueError as e:
        raise ValueError(f"Invalid move: '{move_str}'. Provide SAN (e.g., Nf3) or UCI (e.g., g1f3).") from e
