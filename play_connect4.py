#!/usr/bin/env python3
"""
Play four in a row against C4Beast, or pit it against a random player.
You play as Red (🔴), the engine plays as Yellow (🟡).
"""
import argparse
import logging
import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent / 'src'))

from c4_beast.config import PLAY
from c4_beast.game.board import Board
from c4_beast.match import play_game
from c4_beast.player import BeastPlayer, RandomPlayer, NO_MOVE


def print_board(board):
    """Print the board"""
    width = 2 * board.size + 1
    print("\n  " + " ".join(str(i % 10) for i in range(board.size)))
    print("  " + "-" * width)
    for row in board.state:
        print("| " + " ".join("🔴" if cell == 1 else "🟡" if cell == -1 else "⚪" for cell in row) + " |")
    print("  " + "-" * width)
    print()


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Play against the C4Beast alpha-beta engine")
    parser.add_argument('--depth', type=int, default=PLAY.depth, help='Search depth in plies')
    parser.add_argument('--size', type=int, default=PLAY.size, help='Board side length')
    parser.add_argument('--cache-policy', choices=['verbatim', 'bounded', 'disabled'],
                        default=PLAY.cache_policy, help='Transposition table reuse policy')
    parser.add_argument('--opponent', choices=['human', 'random'], default=PLAY.opponent)
    parser.add_argument('--games', type=int, default=PLAY.games, help='Games vs random opponent')
    parser.add_argument('--ai-first', action='store_true', default=PLAY.ai_first,
                        help='Engine moves first')
    parser.add_argument('--seed', type=int, default=PLAY.seed, help='Random opponent seed')
    parser.add_argument('--verbose', action='store_true', help='Debug logging')
    return parser.parse_args(argv)


def play_human(args, beast):
    """Interactive loop. Returns False if the user quit."""
    board = Board(args.size)
    human, ai = (-1, 1) if args.ai_first else (1, -1)
    current_player = 1
    move_count = 0

    print("\n" + "=" * 60)
    print("🎯 Game Start!")
    print(f"   You are {'🔴' if human == 1 else '🟡'}, {beast.name()} is {'🔴' if ai == 1 else '🟡'}")
    print(f"   Enter column number (0-{args.size - 1}) to drop your piece")
    print("=" * 60)

    while True:
        print_board(board)

        if not board.has_any_legal_move():
            print("🤝 Game Over - Draw!")
            break

        if current_player == human:
            valid_cols = board.valid_moves()
            print(f"Your turn! Valid columns: {valid_cols}")

            while True:
                col = input(f"Enter column (0-{args.size - 1}) or 'q' to quit: ").strip()
                if col.lower() == 'q':
                    print("👋 Thanks for playing!")
                    return False
                try:
                    col = int(col)
                except ValueError:
                    print(f"❌ Invalid input! Enter a number 0-{args.size - 1}")
                    continue
                if col not in valid_cols:
                    print(f"❌ Invalid column! Choose from: {valid_cols}")
                    continue
                break
        else:
            print(f"{beast.name()} is thinking...")
            col = beast.choose_move(board, ai)
            if col == NO_MOVE:
                print("🤝 Game Over - Draw!")
                break
            result = beast.last_result
            print(f"{beast.name()} plays column {col} "
                  f"(value {result.score}, {result.nodes_searched:,} nodes, {result.time_ms} ms)")

        board.drop(col, current_player)
        move_count += 1

        if board.check_win(col):
            print_board(board)
            if current_player == human:
                print("🎉 YOU WIN! Congratulations! 🎉")
            else:
                print("🤖 AI WINS! Better luck next time!")
            break

        current_player = -current_player

    print(f"\nTotal moves: {move_count}")
    return True


def play_random(args, beast):
    opponent = RandomPlayer(seed=args.seed)
    tally = {'win': 0, 'draw': 0, 'loss': 0}

    for game_idx in range(args.games):
        beast_first = args.ai_first if game_idx % 2 == 0 else not args.ai_first
        first, second = (beast, opponent) if beast_first else (opponent, beast)
        beast_color = 1 if beast_first else -1

        record = play_game(first, second, size=args.size)
        if record.is_draw:
            outcome = 'draw'
        elif record.winner == beast_color:
            outcome = 'win'
        else:
            outcome = 'loss'
        tally[outcome] += 1
        print(f"Game {game_idx + 1:3d}: {outcome:5s} in {len(record.moves):2d} moves"
              f"{' (forfeit)' if record.forfeit else ''}")

    print("\n" + "=" * 60)
    print(f"{beast.name()} vs {opponent.name()}: "
          f"{tally['win']} wins, {tally['draw']} draws, {tally['loss']} losses")
    print("=" * 60)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    )

    print("=" * 60)
    print("🎮 C4Beast - alpha-beta four in a row")
    print("=" * 60)

    beast = BeastPlayer(depth=args.depth, cache_policy=args.cache_policy)
    print(f"🧠 {beast.name()} searches {args.depth} plies "
          f"on a {args.size}x{args.size} board (cache: {args.cache_policy})")

    if args.opponent == 'random':
        play_random(args, beast)
        return

    while play_human(args, beast):
        again = input("\nPlay again? (y/n): ").strip().lower()
        if again != 'y':
            print("👋 Thanks for playing!")
            break


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        print("\n\n👋 Game interrupted. Thanks for playing!")
