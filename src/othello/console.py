"""
Console front end: renders the board and runs an interactive game loop.
"""
import logging
import time
from typing import Callable, List

from .config import Config, get_default_config
from .game import GameStatistics, Move, OthelloGame, Player, format_position

logger = logging.getLogger(__name__)

RULE = '=' * 40
QUIT = 'q'

DISC_NAMES = {Player.BLACK: 'Black (●)', Player.WHITE: 'White (○)'}


def format_moves(moves: List[Move]) -> str:
    return ', '.join(format_position(move.position) for move in moves)


def render(game: OthelloGame, show_valid_moves: bool = True) -> str:
    """
    Render the board, the score and the legal moves for the side to move.

    Args:
        game: Game to render
        show_valid_moves: Mark legal squares on the board and list them

    Returns:
        Multi-line string ready to print
    """
    moves = game.get_valid_moves()
    highlight = [move.position for move in moves] if show_valid_moves else []
    stats = game.get_score()
    name = DISC_NAMES[game.get_current_player()]

    lines = [game.board.to_formatted_string(highlight), '',
             f"Score: Black (●) {stats.black} - White (○) {stats.white}"]
    if show_valid_moves and not game.is_game_over():
        if moves:
            lines.append(f"Valid moves for {name}: {format_moves(moves)}")
        else:
            lines.append(f"No valid moves available for {name}.")
    return '\n'.join(lines)


def announce_winner(stats: GameStatistics) -> str:
    """Final score banner."""
    lines = [RULE, 'GAME OVER!', RULE,
             f"Final Score: Black (●) {stats.black} - White (○) {stats.white}"]
    leader = stats.leader
    if leader is None:
        lines.append("It's a tie!")
    else:
        lines.append(f"{DISC_NAMES[leader]} wins!")
    lines.append(RULE)
    return '\n'.join(lines)


def play(game: OthelloGame,
         input_fn: Callable[[str], str] = input,
         output_fn: Callable[[str], None] = print,
         config: Config = None,
         sleep_fn: Callable[[float], None] = time.sleep) -> bool:
    """
    Run the read-eval-print loop until the game ends or a player quits.

    Args:
        game: Game to drive (updated in place)
        input_fn: Prompt reader, ``input`` by default
        output_fn: Line writer, ``print`` by default
        config: Display settings (default: get_default_config())
        sleep_fn: Used for the pauses after passes and rejected moves

    Returns:
        bool: True if the game was played to the end, False if a player quit
    """
    config = config or get_default_config()
    display = config.display

    while not game.is_game_over():
        output_fn('\n' + render(game, display.show_valid_moves))

        player = game.get_current_player()
        if game.advance():
            output_fn(f"\n{DISC_NAMES[player]} passes (no valid moves).")
            if not game.is_game_over():
                sleep_fn(display.pass_delay)
            continue

        try:
            text = input_fn(f"\n{DISC_NAMES[player]}'s turn. Enter move (e.g., A1) or '{QUIT}' to quit: ")
        except EOFError:
            text = QUIT
        text = text.strip()

        if text.lower() == QUIT:
            output_fn('\nGame quit by player.')
            logger.info("Game quit by %s", player.display_name)
            return False

        if not game.make_move(text):
            output_fn('\nInvalid move! Please try again.')
            sleep_fn(display.invalid_move_delay)
            continue

        output_fn(f"\nMove {text.upper()} applied successfully!")

    output_fn('\n' + render(game, show_valid_moves=False))
    output_fn('\n' + announce_winner(game.get_score()))
    return True
