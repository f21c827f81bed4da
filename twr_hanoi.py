#!/usr/bin/env python3
"""
this script is to print the moves that solve the Tower of Hanoi puzzle.
It reads the number of disks from the command line or prompts the user for it,
then prints one line per move, e.g. "Move disk 1 from A to C".
"""

import os
import sys
import logging
from collections import namedtuple

#configure logging
logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')

#define rod names and limits
PEG_NAMES = ('A', 'B', 'C')  # source, auxiliary, destination
MAX_DISKS = 32  # largest disk count we print a solution for

Move = namedtuple("Move", ["disk", "from_peg", "to_peg"])


class HanoiError(Exception):
    """base class for errors raised by this script"""


class InvalidInput(HanoiError, ValueError):
    """disk count is not a non-negative integer, or the rods are not distinct"""


class ResourceExhausted(HanoiError):
    """disk count is too large to print a solution for"""


class IllegalMove(HanoiError):
    """a move breaks the rules of the puzzle"""


def _check_arguments(n, source, destination, auxiliary):
    # bool is an int subclass, but True disks makes no sense
    if isinstance(n, bool) or not isinstance(n, int):
        raise InvalidInput(f"Disk count must be an integer, got {n!r}")
    if n < 0:
        raise InvalidInput(f"Disk count must not be negative, got {n}")
    if len({source, destination, auxiliary}) != 3:
        raise InvalidInput(
            f"Rods must be distinct, got {source!r}, {destination!r}, {auxiliary!r}"
        )


def _solve(n, source, destination, auxiliary):
    if n == 0:
        return
    if n == 1:
        yield Move(1, source, destination)
        return
    # move n-1 disks out of the way, onto the auxiliary rod
    yield from _solve(n - 1, source, auxiliary, destination)
    yield Move(n, source, destination)
    # and put them back on top of disk n
    yield from _solve(n - 1, auxiliary, destination, source)


def generate(n, source='A', destination='C', auxiliary='B'):
    """
    Generates the moves that transfer n disks from source to destination.

    Args:
      n: The number of disks, stacked on source with the largest at the bottom.
      source: The name of the rod the disks start on.
      destination: The name of the rod the disks must end up on.
      auxiliary: The name of the spare rod.

    Returns an iterator of Move tuples, produced one at a time in solution
    order. There are exactly 2**n - 1 of them, none at all for n == 0.
    Raises InvalidInput for a negative or non-integer n or repeated rod names.
    """
    _check_arguments(n, source, destination, auxiliary)
    return _solve(n, source, destination, auxiliary)


def generate_iterative(n, source='A', destination='C', auxiliary='B'):
    """same moves as generate(), but driven by a work list instead of recursion"""
    _check_arguments(n, source, destination, auxiliary)
    return _solve_with_stack(n, source, destination, auxiliary)


def _solve_with_stack(n, source, destination, auxiliary):
    # items are either ("solve", n, src, dst, aux) or ("move", disk, src, dst)
    pending = [("solve", n, source, destination, auxiliary)]
    while pending:
        item = pending.pop()
        if item[0] == "move":
            _, disk, src, dst = item
            yield Move(disk, src, dst)
            continue

        _, count, src, dst, aux = item
        if count == 0:
            continue
        # pushed in reverse so they pop in solution order
        pending.append(("solve", count - 1, aux, dst, src))
        pending.append(("move", count, src, dst))
        pending.append(("solve", count - 1, src, aux, dst))


def format_move(move):
    """returns the printable form of a move"""
    return f"Move disk {move.disk} from {move.from_peg} to {move.to_peg}"


def new_pegs(n, source='A', destination='C', auxiliary='B'):
    """
    Builds the starting position: all n disks on source, bottom to top.
    Example for n == 3: {'A': [3, 2, 1], 'B': [], 'C': []}
    """
    _check_arguments(n, source, destination, auxiliary)
    return {
        source: list(range(n, 0, -1)),
        auxiliary: [],
        destination: [],
    }


def move_disk(move, pegs):
    """Applies one move to the pegs, raising IllegalMove if the rules forbid it."""
    if move.from_peg == move.to_peg:
        raise IllegalMove(f"Cannot move disk {move.disk} from rod {move.from_peg} onto itself")
    for peg in (move.from_peg, move.to_peg):
        if peg not in pegs:
            raise IllegalMove(f"Cannot move disk {move.disk}: there is no rod {peg}")

    from_stack = pegs[move.from_peg]
    to_stack = pegs[move.to_peg]

    if not from_stack:
        raise IllegalMove(f"Cannot move disk {move.disk}: rod {move.from_peg} is empty")

    disk = from_stack[-1]
    if disk != move.disk:
        raise IllegalMove(
            f"Cannot move disk {move.disk} from {move.from_peg}: disk {disk} is on top"
        )

    # never put a larger disk on a smaller one
    if to_stack and to_stack[-1] < disk:
        raise IllegalMove(f"Cannot place disk {disk} on smaller disk {to_stack[-1]}")

    to_stack.append(from_stack.pop())
    return pegs


def replay(moves, pegs):
    """applies every move in order and returns the final pegs"""
    for move in moves:
        move_disk(move, pegs)
    return pegs


def is_solved(pegs, n, destination='C'):
    """True when all n disks sit on destination in order and the other rods are empty"""
    if pegs.get(destination) != list(range(n, 0, -1)):
        return False
    return all(not disks for peg, disks in pegs.items() if peg != destination)


def parse_disk_count(text):
    """turns user input into a disk count, or raises InvalidInput/ResourceExhausted"""
    try:
        n = int(text.strip())
    except ValueError:
        raise InvalidInput(f"Invalid input '{text.strip()}'. Please enter a whole number of disks.")

    if n < 0:
        raise InvalidInput(f"Invalid number of disks {n}. Please enter 0 or more.")
    if n > MAX_DISKS:
        raise ResourceExhausted(
            f"{n} disks would need more than {2**MAX_DISKS - 1} moves. Please enter at most {MAX_DISKS}."
        )
    return n


def get_disk_count():
    """Prompts the user for the number of disks and validates it."""
    try:
        text = input("Enter the number of disks: ")
    except EOFError:
        raise InvalidInput("No number of disks was entered.")
    return parse_disk_count(text)


def main(argv=None):
    """prints the solution for the requested disk count and returns the exit status"""
    if argv is None:
        argv = sys.argv[1:]

    try:
        if argv:
            n = parse_disk_count(argv[0])
        else:
            n = get_disk_count()
    except HanoiError as e:
        logging.error(f"Error: {e}")
        return 1

    source, auxiliary, destination = PEG_NAMES
    logging.info(f"Solving for {n} disks, {2**n - 1} moves from {source} to {destination}")

    try:
        for move in generate(n, source, destination, auxiliary):
            print(format_move(move))
        sys.stdout.flush()
    except BrokenPipeError:
        # reader went away, e.g. piped into head; point stdout at devnull so
        # the flush at interpreter exit does not fail again
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
        os.close(devnull)
        logging.info("Output closed early, stopping")
        return 1

    logging.info("Script finished")
    return 0


# --- Main script execution ---
if __name__ == "__main__":
    sys.exit(main())
