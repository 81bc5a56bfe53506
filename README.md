# bismuth-search

The search core of a small chess engine, packaged as a plain Python library
with no runtime dependencies.

## Modules

- `bismuth_search.moves` holds `PieceType`, `Castling`, `Move` and `MoveList`.
  A `Move` stores its start and end squares as single-bit bitboards.
  `MoveList` accepts up to 218 moves and raises `OverflowError` past that
  limit. `MoveList.order(pv_move)` sorts the moves best first. Captures are
  scored by MVV/LVA, promotions and castling moves get a bonus, and the
  principal-variation move, if given, goes to the front. `piece_value` and
  `score_move` return the scores this ordering uses.
- `bismuth_search.pregenerate` provides `knight_attacks()` and
  `king_attacks()`. Each returns a tuple of 64 bitboards giving the squares
  the piece reaches from each square.
- `bismuth_search.repetition` provides `RepetitionTable`, a stack of up to 256
  position hashes. Once the table is full, `add` ignores new hashes.
  `pop_last` raises `IndexError` when the table is empty. `contains(key)` is
  true once the hash has been recorded at least three times.
- `bismuth_search.transposition` provides `TranspositionTable`, `Entry`,
  `NodeType` and `is_mate_score`. The table has
  `size_mb * 1024 * 1024 // entry_size` slots and indexes them by
  `key % count`. `store` always replaces whatever is in the slot.
  `lookup(key, depth, ply_from_root, alpha, beta)` returns a stored score that
  can be used for the given window, or `None` if there is none. Mate scores
  are adjusted by ply when stored and when retrieved.
- `bismuth_search.zobrist` provides an `Xorshift128` generator and
  `generate_keys(seed)`, which returns 781 keys and uses `(1, 1)` as the
  default seed. `zobrist_hash(pieces, white_to_move, castling_rights,
  last_double_pawn_push, keys=None)` hashes a position. `pieces` is twelve
  bitboards: white pawn, rook, knight, bishop, queen and king, then the same
  six for black.
- `bismuth_search.search` provides `Searcher`, an iterative-deepening negamax
  search with alpha-beta pruning, quiescence search over captures, and a
  transposition table. It runs against any object that implements the
  `Position` protocol:
  - `zobrist_hash()`
  - `generate_moves(captures_only)`, which returns a `MoveList`
  - `game_state(moves)`, which returns a `GameState`
  - `make_move(move)` and `undo_move(undo)`
  - `evaluate()`, which scores the position from the side to move's point of view

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
from bismuth_search.moves import Move, MoveList, PieceType

moves = MoveList()
moves.add(Move(start_square=1 << 12, end_square=1 << 28, piece_type=PieceType.PAWN))
moves.add(Move(start_square=1 << 3, end_square=1 << 59,
               piece_type=PieceType.QUEEN, capture=PieceType.QUEEN))
moves.order(None)
print(moves[0].capture)  # PieceType.QUEEN: the capture comes first
```

To search, write a `Position` for your board and pass it to a `Searcher`:

```python
from bismuth_search.search import Searcher

searcher = Searcher(16)
searcher.stop_after(0.1)      # request a stop after 0.1 seconds
best = searcher.iterative_deepening(position, 64)
print(best.move, best.eval, searcher.nodes, searcher.seldepth)
```

`iterative_deepening` stops in either of two cases: when `stop()` is called
(or the `stop_after` timer fires), or when it has finished `max_depth`. It
returns the best move from the last iteration that completed. `nodes` and
`seldepth` count quiescence nodes and the deepest ply reached. They add up
across searches until you reset them.

## What this package does not do

This package has no board representation. It cannot generate moves, parse
FEN strings or evaluate positions, so all of that must come from your
`Position` implementation. It has no UCI command loop, no opening book and no
executable command. `Searcher` does not consult `RepetitionTable`; any
repetition handling has to go in your `game_state`.