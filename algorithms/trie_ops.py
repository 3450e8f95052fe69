"""
trie_ops.py — Trie Walk Narration
==================================
Character-by-character walks from the synthetic ROOT node.

  insert      : narrated from the store's TrieMutation (path + ids it created)
  search      : whole word; distinguishes found / incomplete / not found
  starts_with : prefix only

Input is case-folded to lowercase before anything is looked up.
"""

from typing import Generator, List

from structures import Trie, TrieMutation
from algorithms.step import Step, StepBuilder, StepKind


PSEUDOCODE: List[str] = [
    "def walk(trie, text):",                       # 0
    "    node ← ROOT",                             # 1
    "    for c in text:",                          # 2
    "        if c not in node.children:",          # 3
    "            insert: node.children[c] ← new",  # 4
    "            search: return NOT FOUND",        # 5
    "        node ← node.children[c]",             # 6
    "    insert: node.isEndOfWord ← true",         # 7
    "    search: return node.isEndOfWord",         # 8
    "    prefix: return FOUND",                    # 9
]


def _looking(sb: StepBuilder, trie: Trie, node_id: str, char: str) -> Step:
    return sb.emit(StepKind.COMPARE, f"Looking for character '{char}' in node '{trie.label(node_id)}'",
                   highlight_nodes=[node_id], line=3, current_char=char)


def trie_insert(trie: Trie, mutation: TrieMutation) -> Generator[Step, None, None]:
    sb = StepBuilder()
    word = mutation.word
    sb.path = [mutation.path[0]]
    yield sb.emit(StepKind.START, f'Inserting word "{word}"', highlight_nodes=[mutation.path[0]], line=1)

    for i, char in enumerate(word):
        here, child = mutation.path[i], mutation.path[i + 1]
        yield _looking(sb, trie, here, char)
        sb.path.append(child)
        if child in mutation.created:
            yield sb.emit(StepKind.CREATE, f"Character '{char}' not found, creating new node",
                          highlight_nodes=[child], line=4, current_char=char)
        else:
            yield sb.emit(StepKind.VISIT, f"Character '{char}' found, moving to child node",
                          highlight_nodes=[child], line=6, current_char=char)

    last = mutation.path[-1]
    if mutation.already_word:
        yield sb.emit(StepKind.EXISTS, f'"{word}" is already marked as a word', highlight_nodes=[last], line=7)
    else:
        yield sb.emit(StepKind.UPDATE, f'Marking end of word "{word}"', highlight_nodes=[last], line=7)
    yield sb.emit(StepKind.COMPLETE, f'Successfully inserted "{word}"', highlight_nodes=[last],
                  output=f'Word "{word}" inserted successfully', is_final=True)


def _walk(sb: StepBuilder, trie: Trie, text: str):
    """
    Shared descent for search / starts_with.  Yields steps; returns the
    node id reached, or None if a character was missing.
    """
    node_id = trie.root_id
    for char in text:
        yield _looking(sb, trie, node_id, char)
        child = trie.nodes[node_id].children.get(char)
        if child is None:
            return None
        node_id = child
        sb.path.append(node_id)
        yield sb.emit(StepKind.VISIT, f"Character '{char}' found, moving to child node",
                      highlight_nodes=[node_id], line=6, current_char=char)
    return node_id


def trie_search(trie: Trie, word: str) -> Generator[Step, None, None]:
    sb = StepBuilder()
    word = word.lower()
    sb.path = [trie.root_id]
    yield sb.emit(StepKind.START, f'Searching for word "{word}"', highlight_nodes=[trie.root_id], line=1)

    end = yield from _walk(sb, trie, word)
    if end is None:
        missing = word[len(sb.path) - 1]
        yield sb.emit(StepKind.NOT_FOUND, f"Character '{missing}' not found. Word \"{word}\" does not exist",
                      line=5, current_char=missing,
                      output=f'NOT FOUND: "{word}" does not exist in trie', is_final=True)
    elif trie.nodes[end].is_end_of_word:
        yield sb.emit(StepKind.FOUND, f'Word "{word}" found!', highlight_nodes=[end], line=8,
                      output=f'FOUND: "{word}" exists in trie', is_final=True)
    else:
        yield sb.emit(StepKind.INCOMPLETE, f'Path exists but "{word}" is not a complete word',
                      highlight_nodes=[end], line=8,
                      output=f'NOT FOUND: "{word}" is not a complete word', is_final=True)


def trie_starts_with(trie: Trie, prefix: str) -> Generator[Step, None, None]:
    sb = StepBuilder()
    prefix = prefix.lower()
    sb.path = [trie.root_id]
    yield sb.emit(StepKind.START, f'Checking if any word starts with "{prefix}"',
                  highlight_nodes=[trie.root_id], line=1)

    end = yield from _walk(sb, trie, prefix)
    if end is None:
        missing = prefix[len(sb.path) - 1]
        yield sb.emit(StepKind.NOT_FOUND,
                      f"Character '{missing}' not found. No words start with \"{prefix}\"",
                      line=5, current_char=missing,
                      output=f'PREFIX NOT FOUND: No words start with "{prefix}"', is_final=True)
    else:
        yield sb.emit(StepKind.FOUND, f'Prefix "{prefix}" found! Words starting with "{prefix}" exist',
                      highlight_nodes=[end], line=9,
                      output=f'PREFIX FOUND: Words starting with "{prefix}" exist', is_final=True)
