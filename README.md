# wordtrap

`wordtrap` is a library for word-ladder games played on a graph of
same-length words. Two words are linked when they differ in exactly one
letter, so `pies` links to `ties`, `pits` and `pier`. Players take turns
moving from the current word to a linked word that has not been used yet.
A player left with nowhere to go is trapped and loses.

It uses only the Python standard library.

## What is in the package

- `wordtrap.board`: `WordBoard` holds the words and their links, and
  `WordSet` records which word ids are used. Unknown words raise
  `UnknownWordError`.
- `wordtrap.treestorage`: `TreeStorage` and `TreeStorageNode`. These are the
  search tree a breadth-first search builds, where each node remembers the
  word it was reached from.
- `wordtrap.bfs`:
  - `breadth_first_search_distance` finds the words a given number of links
    away and returns them as a `BFSResult`.
  - `breadth_first_search_goal` picks one of those words at random.
  - `path_to_nearest_word` returns the path to the nearest word of a goal
    set that never passes through an avoided word.
- `wordtrap.minimax`: minimax with alpha-beta pruning (`minimax`,
  `MinimaxOutput`) and the comparison helpers it uses.
- `wordtrap.minimax2`: minimax with a pluggable score function
  (`minimax2`, `Score`, `ScoreParameters`). It comes with `flwg_score` for
  the trap game and `flwc_score` for the challenge game, plus
  `choose_random_word`.
- `wordtrap.game`: the two-player bots `bot_ply` (minimax) and
  `weak_bot_ply` (first free link). It also has `is_trapped`,
  `direct_adjacency_hint`, and `self_play_test`, which pits the two bots
  against each other and returns a `SelfPlayResult`.
- `wordtrap.maxn` and `wordtrap.hypermax`: multiplayer search. `max_n` is
  Max-N. `hypermax` / `hypermax_search` is Max-N that stops early once the
  players' alphas add up to zero or more.
- `wordtrap.multiplayer`: `multi_bot_ply`, a Max-N bot, and
  `multiplayer_test`, which plays a Hypermax bot against first-link bots and
  counts wins.
- `wordtrap.challenges` and `wordtrap.flwc`: the challenge game, where the
  aim is to reach a goal word while steering clear of avoided words.
  - Word sets are built from a letter condition with
    `word_set_given_condition` and `EndWordParameters`.
  - Start words are picked with `choose_start_word` and
    `StartWordParameters`.
  - The bots are `bot_ply_flwc`, `bot_ply_random` and
    `bot_ply_max_adjacencies`.
  - `generalized_flwc_game` plays a short scripted match.

## Building a board

```python
from wordtrap.board import WordBoard

board = WordBoard.from_words(["pies", "ties", "pits", "pier", "tier", "tees"])
# or from a file with one word per line, keeping alphabetic 4-letter words:
# board = WordBoard.from_file("words.txt", 4)

pies = board.word_id("pies")
print([board.word(i) for i in board.connections(pies)])
print(board.num_connections(pies))
```

`from_words` lower-cases and strips each word and drops duplicates. It raises
`ValueError` when the list is empty or the words differ in length.

## Playing against the minimax bot

```python
from wordtrap.game import bot_ply, is_trapped

used = board.new_word_set()
current = board.word_id("pies")
used.mark(current)

reply = bot_ply(board, current, 4, used)   # search 4 plies deep
if reply == -1:
    print("the bot is trapped")
else:
    print("bot plays", board.word(reply))
    print("you are trapped:", is_trapped(board, reply, used))
```

`bot_ply` marks the word it chooses as used. It returns `-1` when it has no
move left.

## Searching the graph

```python
from wordtrap.bfs import path_to_nearest_word

goal = board.new_word_set()
goal.mark(board.word_id("tees"))
avoid = board.new_word_set()

path = path_to_nearest_word(board, board.word_id("pies"), 8, goal, avoid)
print([board.word(i) for i in path])
```

The path includes both ends. It may come back without a goal word:

- If the search reaches `max_distance` words without finding a goal, the
  first path of that length is returned instead.
- An empty list means the start word is avoided, or there was nothing left
  to reach.

## Multiplayer

```python
from wordtrap.multiplayer import multi_bot_ply

used = board.new_word_set()
start = board.word_id("pies")
used.mark(start)
move = multi_bot_ply(board, start, 0, 3, 6, used)  # player 0 of 3, depth 6
```

## The challenge game

```python
from wordtrap.challenges import EndWordParameters, word_set_given_condition
from wordtrap.flwc import bot_ply_flwc

goal = word_set_given_condition(board, EndWordParameters("o"))
avoid = word_set_given_condition(board, EndWordParameters("e"))

used = board.new_word_set()
start = board.word_id("pies")
used.mark(start)
move = bot_ply_flwc(board, used, start, 2, goal, avoid)
```

`choose_start_word` returns a start word together with its solution path. It
raises `ValueError` when no word on the board meets the limits.

## What the package does not do

The package has no command-line program and no interactive game loop. It
does not prompt a player for words. It ships no word list, so you supply your
own words or file. Random choices use a `random.Random` you pass in, or a
fresh one if you do not.

## Running the tests

Install the package with its `test` extra, then run `pytest` from the
project root.