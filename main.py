"""
Console TicTacToe.

This script ties together:
- Game session (board, turns, scores)
- AI opponent (single player mode)
- Terminal input/output

Run this script to play TicTacToe in the terminal!
"""

from typing import Optional

from logic.ai_player import Difficulty
from logic.board import Cell
from logic.config import GameConfig
from logic.exceptions import GameError
from logic.game_state import GameSession, GameMode
from logic.win_checker import Outcome


class ConsoleGame:
    """
    Terminal front end for a GameSession.

    Game flow:
    1. Player 1 (X) types a move as "row col"
    2. The computer (single player) or player 2 (two player) answers as O
    3. When a round ends, the result and scores are shown and a new round
       starts
    """

    def __init__(
        self,
        mode: GameMode = GameMode.SINGLE_PLAYER,
        difficulty: Difficulty = Difficulty.HARD,
        config: Optional[GameConfig] = None
    ):
        self.session = GameSession(mode, difficulty, config)
        self.is_running = False

        print("\n" + "="*60)
        print("   TicTacToe")
        if mode == GameMode.SINGLE_PLAYER:
            print(f"   You play X, computer plays O ({difficulty.value})")
        else:
            print("   Player 1 plays X, Player 2 plays O")
        print("="*60)
        print("Enter moves as 'row col' (0-2). 'r' resets the round,")
        print("'s' resets the scores, 'q' quits.\n")

    def start(self):
        """Start the game."""
        self.is_running = True
        self._print_board()

        while self.is_running:
            if self.session.is_computer_turn:
                self._computer_move()
            else:
                self._human_move()

            if self.session.is_round_over:
                self._show_round_result()
                self.session.reset_round()
                self._print_board()

    def _human_move(self):
        """Read and play one line of input."""
        player = "Player 1" if self.session.current_mark == Cell.X else "Player 2"
        text = input(f"{player} ({self.session.current_mark.value}) > ").strip().lower()

        if text == "q":
            print("\nGame quit by user.")
            self.is_running = False
            return
        if text == "r":
            print("\nResetting round...")
            self.session.reset_round()
            self._print_board()
            return
        if text == "s":
            self.session.reset_scores()
            self._print_scores()
            return

        parts = text.replace(",", " ").split()
        if len(parts) != 2 or not all(p.lstrip("-").isdigit() for p in parts):
            print("Please enter a move as 'row col', e.g. '1 1'.")
            return

        row, col = int(parts[0]), int(parts[1])
        try:
            self.session.submit_move(row, col)
        except GameError as e:
            print(f"WARNING: {e}")
            return

        self._print_board()

    def _computer_move(self):
        """Let the AI play."""
        print("\n>>> Computer is thinking...")
        row, col = self.session.request_ai_move()
        print(f">>> Computer placed O at ({row}, {col})")
        self._print_board()

    def _print_board(self):
        print()
        print(self.session.board.render())
        print()

    def _print_scores(self):
        if self.session.mode == GameMode.SINGLE_PLAYER:
            print(f"Score - You: {self.session.player1_score}  "
                  f"Computer: {self.session.player2_score}")
        else:
            print(f"Score - Player 1: {self.session.player1_score}  "
                  f"Player 2: {self.session.player2_score}")

    def _show_round_result(self):
        """Show the result of the finished round."""
        print("\n" + "="*60)
        verdict = self.session.verdict
        single = self.session.mode == GameMode.SINGLE_PLAYER

        if verdict == Outcome.X_WINS:
            print("   You win!" if single else "   Player 1 wins!")
        elif verdict == Outcome.O_WINS:
            print("   Computer wins!" if single else "   Player 2 wins!")
        else:
            print("   It's a draw!")

        line = self.session.win_checker.get_winning_line(self.session.board)
        if line:
            print(f"   Winning line: {line}")

        print("="*60)
        self._print_scores()


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="TicTacToe")
    parser.add_argument(
        "--mode",
        choices=[m.value for m in GameMode],
        default=GameConfig.DEFAULT_MODE,
        help="'single' to play the computer, 'two' for two humans"
    )
    parser.add_argument(
        "--difficulty",
        choices=[d.value for d in Difficulty],
        default=GameConfig.DEFAULT_DIFFICULTY,
        help="Computer difficulty in single player mode"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Print AI search statistics"
    )

    args = parser.parse_args()

    config = GameConfig()
    config.VERBOSE = args.verbose

    mode = GameMode(args.mode)

    game = ConsoleGame(mode=mode, difficulty=Difficulty(args.difficulty), config=config)

    try:
        game.start()
    except (KeyboardInterrupt, EOFError):
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")


if __name__ == "__main__":
    main()
