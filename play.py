"""
Main script to play Othello in the console.
"""
import os
import sys

from othello.config import Config, get_default_config
from othello.console import play
from othello.errors import BoardFormatError
from othello.game import Board, OthelloGame, Player
from othello.logger import setup_logger

def load_board(path: str, side_to_move: Player) -> Board:
    """Read a text board from a file; exits with the validation message if it is malformed."""
    with open(path, 'r') as f:
        text = f.read().rstrip('\n')
    try:
        return Board.parse(text, side_to_move)
    except BoardFormatError as e:
        sys.exit(f"{path}: {e.message}")

def main():
    """Play a game with the specified configuration."""
    import argparse

    parser = argparse.ArgumentParser(description='Play Othello in the console')
    parser.add_argument('--config', type=str, default='configs/default_config.json',
                      help='Path to config file')
    parser.add_argument('--board', type=str, default=None,
                      help='Path to a text board (8 lines of B, W and .) to start from')
    parser.add_argument('--white-first', action='store_true',
                      help='White moves first (overrides the config)')
    parser.add_argument('--log-level', type=str, default=None,
                      help='Logging level (overrides the config)')
    args = parser.parse_args()

    # Load configuration
    if os.path.exists(args.config):
        config = Config.load(args.config)
    else:
        print(f"Config file {args.config} not found, using default configuration")
        config = get_default_config()

    if args.white_first:
        config.starting_player = 'white'
    if args.log_level:
        config.logging.log_level = args.log_level

    logger = setup_logger(config)
    side_to_move = config.starting_player_enum()

    if args.board:
        board = load_board(args.board, side_to_move)
    else:
        board = Board.create_empty()
        if side_to_move is not Player.BLACK:
            board = Board(board.get_board_state(), side_to_move)

    print("\n" + "=" * 40)
    print("OTHELLO / REVERSI")
    print("=" * 40)
    print("Rules:")
    print(f"- {side_to_move.display_name} moves first")
    print("- Place discs to flip opponent's discs")
    print("- Valid moves shown as (·)")
    print("- Enter moves like: A1, B2, C3, etc.")
    print("- Type \"q\" to quit")
    print("=" * 40)

    try:
        play(OthelloGame(board), config=config)
    except KeyboardInterrupt:
        print("\nGame interrupted.")
    finally:
        logger.close()

if __name__ == "__main__":
    main()
