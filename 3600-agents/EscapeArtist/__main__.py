"""
Game loop: read the referee's state from stdin, answer on stdout.

    python -m EscapeArtist
"""

import sys

from .agent import PlayerAgent
from .debug_reporter import debug
from .game_io import format_decision, read_init, read_turn


def main(stdin=sys.stdin, stdout=sys.stdout):
    info = read_init(stdin)
    agent = PlayerAgent(info)

    while True:
        try:
            state = read_turn(stdin, info)
        except EOFError:
            debug("[Main] Input closed, game over")
            return 0

        decision = agent.play(state)
        print(format_decision(decision), file=stdout, flush=True)


if __name__ == "__main__":
    sys.exit(main())
