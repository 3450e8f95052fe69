"""
hash_ops.py — Chained Hashing Narration
========================================
Hash-then-scan walks for the hash set and hash table pages.

Every operation starts the same way: compute h(key), look at that
bucket.  Then:
  add / put : existing key → "already exists" (set) or overwrite (table);
              otherwise append, with a separate COLLISION step only when
              the bucket already held items.
  contains / get / remove : scan the chain; not-found when the bucket
              is empty or the scan runs out.
"""

from typing import Generator, List, Sequence

from structures import HashMutation, HashSet, HashTable
from structures.hashing import ChainedBuckets
from algorithms.step import Step, StepBuilder, StepKind


PSEUDOCODE: List[str] = [
    "def op(table, key):",                          # 0
    "    h ← |key| mod bucketCount",                # 1
    "    chain ← buckets[h]",                       # 2
    "    for entry in chain:",                      # 3
    "        if entry.key = key: return entry",     # 4
    "    put: chain.append(key)",                   # 5
    "    get: return NOT FOUND",                    # 6
]


def _title(store: ChainedBuckets) -> str:
    return "HashTable" if isinstance(store, HashTable) else "HashSet"


def _hash_steps(sb: StepBuilder, store: ChainedBuckets, key: int, bucket: int):
    sb.overlay["bucket"] = bucket
    shown = f"|{key}|" if key < 0 else str(key)
    yield sb.emit(StepKind.HASH, f"Computing hash for {key}: {shown} % {store.bucket_count} = {bucket}",
                  line=1)
    yield sb.emit(StepKind.VISIT, f"Looking at bucket {bucket}", line=2)


def _scan(sb: StepBuilder, key: int, bucket: int, chain: Sequence[int]):
    """Narrate the linear chain scan.  Returns the match position or None."""
    if chain:
        yield sb.emit(StepKind.VISIT, f"Searching through chain in bucket {bucket}", line=3)
    for pos, existing in enumerate(chain):
        yield sb.emit(StepKind.COMPARE, f"Comparing {key} with {existing} at position {pos}",
                      line=4, position=pos)
        if existing == key:
            return pos
    return None


def hash_add(store: ChainedBuckets, mutation: HashMutation) -> Generator[Step, None, None]:
    """Narrates HashSet.add and HashTable.put from the store's mutation."""
    sb = StepBuilder()
    key, bucket, title = mutation.key, mutation.bucket, _title(store)
    sb.overlay["chain"] = list(mutation.chain_before)
    yield from _hash_steps(sb, store, key, bucket)

    if mutation.existed:
        yield from _scan(sb, key, bucket, mutation.chain_before)
        if isinstance(store, HashTable):
            yield sb.emit(StepKind.UPDATE,
                          f"Key {key} already exists, updating value {mutation.old_value} → {mutation.value}",
                          highlight_nodes=[mutation.entry_id], line=4, position=mutation.position)
            yield sb.emit(StepKind.COMPLETE, f"Successfully updated {key} in {title}",
                          highlight_nodes=[mutation.entry_id],
                          output=f"Updated {key} → {mutation.value}", is_final=True)
        else:
            yield sb.emit(StepKind.EXISTS, f"Value {key} already exists in {title}",
                          highlight_nodes=[mutation.entry_id], line=4, position=mutation.position,
                          output=f"{key} already exists in bucket {bucket}", is_final=True)
        return

    if mutation.chain_before:
        yield sb.emit(StepKind.COLLISION, f"Collision detected! Bucket {bucket} already has items", line=3)
        yield from _scan(sb, key, bucket, mutation.chain_before)
        sb.overlay["chain"] = list(store.keys_in(bucket))
        yield sb.emit(StepKind.INSERT, f"Adding {key} to chain in bucket {bucket}",
                      highlight_nodes=[mutation.entry_id], line=5, position=mutation.position)
    else:
        sb.overlay["chain"] = list(store.keys_in(bucket))
        yield sb.emit(StepKind.INSERT, f"Bucket {bucket} is empty, adding {key}",
                      highlight_nodes=[mutation.entry_id], line=5, position=mutation.position)

    yield sb.emit(StepKind.COMPLETE, f"Successfully added {key} to {title}",
                  highlight_nodes=[mutation.entry_id],
                  output=f"Added {key} to bucket {bucket}", is_final=True)


def hash_remove(store: ChainedBuckets, mutation: HashMutation) -> Generator[Step, None, None]:
    sb = StepBuilder()
    key, bucket, title = mutation.key, mutation.bucket, _title(store)
    sb.overlay["chain"] = list(mutation.chain_before)
    yield from _hash_steps(sb, store, key, bucket)

    yield from _scan(sb, key, bucket, mutation.chain_before)
    if not mutation.existed:
        yield sb.emit(StepKind.NOT_FOUND, f"Value {key} not found in {title}", line=6,
                      output=f"{key} not found", is_final=True)
        return

    yield sb.emit(StepKind.FOUND, f"Found {key} in bucket {bucket}",
                  highlight_nodes=[mutation.entry_id], line=4, position=mutation.position)
    sb.overlay["chain"] = list(store.keys_in(bucket))
    yield sb.emit(StepKind.DELETE, f"Successfully removed {key} from {title}",
                  output=f"Removed {key} from bucket {bucket}", is_final=True)


def hash_lookup(store: ChainedBuckets, key: int) -> Generator[Step, None, None]:
    """contains() for the set, get() for the table.  Read-only."""
    sb = StepBuilder()
    bucket, title = store.hash(key), _title(store)
    chain = store.keys_in(bucket)
    sb.overlay["chain"] = list(chain)
    yield from _hash_steps(sb, store, key, bucket)

    pos = yield from _scan(sb, key, bucket, chain)
    if pos is None:
        yield sb.emit(StepKind.NOT_FOUND, f"Value {key} not found in {title}", line=6,
                      output=f"{key} not found", is_final=True)
        return

    entry = store.chain(bucket)[pos]
    if isinstance(store, HashTable):
        yield sb.emit(StepKind.FOUND, f"Found {key} in bucket {bucket}: value = {entry.value}",
                      highlight_nodes=[entry.id], line=4, position=pos,
                      output=f"get({key}) = {entry.value}", is_final=True)
    else:
        yield sb.emit(StepKind.FOUND, f"Found {key} in bucket {bucket}",
                      highlight_nodes=[entry.id], line=4, position=pos,
                      output=f"{key} exists in {title}", is_final=True)
