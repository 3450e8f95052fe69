"""
hashing.py — Chained Hash Set & Hash Table Stores
=================================================
Fixed bucket count, `h(key) = |key| mod bucket_count`, collisions
resolved by appending to a per-bucket chain.  Never resizes, never
rehashes — the point of the page is to watch chains grow.
"""

from dataclasses import dataclass
from typing import Any, List, Optional, Tuple

from structures.errors import InvalidInput
from structures.node import new_id


DEFAULT_BUCKET_COUNT = 10


class HashEntry:
    __slots__ = ("id", "key", "value", "hash")

    def __init__(self, key: int, value: Any, hash_: int):
        self.id:    str = new_id()
        self.key:   int = key
        self.value: Any = value
        self.hash:  int = hash_

    def to_dict(self) -> dict:
        return {"id": self.id, "key": self.key, "value": self.value, "hash": self.hash}


@dataclass
class HashMutation:
    """
    op           : "add" | "put" | "remove"
    key          : Key that was hashed.
    bucket       : Bucket index the key hashed to.
    chain_before : Keys in that bucket BEFORE the mutation, chain order.
    position     : Chain position of the entry touched (None when absent).
    entry_id     : ID of the entry added / updated / removed.
    existed      : Key was already present before the call.
    old_value    : Previous value for a table overwrite or removal.
    """
    op:           str
    key:          int
    bucket:       int
    chain_before: Tuple[int, ...]
    position:     Optional[int] = None
    entry_id:     Optional[str] = None
    existed:      bool          = False
    old_value:    Any           = None
    value:        Any           = None


class ChainedBuckets:
    """Shared bucket array + chain scan used by both set and table."""

    def __init__(self, bucket_count: int = DEFAULT_BUCKET_COUNT):
        if bucket_count < 1:
            raise InvalidInput("bucket count must be positive")
        self.bucket_count: int                    = bucket_count
        self.buckets:      List[List[HashEntry]]  = [[] for _ in range(bucket_count)]

    def hash(self, key: int) -> int:
        return abs(key) % self.bucket_count

    def chain(self, bucket: int) -> List[HashEntry]:
        return self.buckets[bucket]

    def find(self, key: int) -> Tuple[int, Optional[int]]:
        """(bucket, chain position) — position is None when absent."""
        bucket = self.hash(key)
        for pos, entry in enumerate(self.buckets[bucket]):
            if entry.key == key:
                return bucket, pos
        return bucket, None

    def keys_in(self, bucket: int) -> Tuple[int, ...]:
        return tuple(e.key for e in self.buckets[bucket])

    def _append(self, key: int, value: Any) -> HashMutation:
        bucket = self.hash(key)
        before = self.keys_in(bucket)
        entry = HashEntry(key, value, bucket)
        self.buckets[bucket].append(entry)
        return HashMutation(op="", key=key, bucket=bucket, chain_before=before,
                            position=len(before), entry_id=entry.id, value=value)

    def remove(self, key: int) -> HashMutation:
        bucket, pos = self.find(key)
        before = self.keys_in(bucket)
        if pos is None:
            return HashMutation(op="remove", key=key, bucket=bucket, chain_before=before)
        entry = self.buckets[bucket].pop(pos)
        return HashMutation(op="remove", key=key, bucket=bucket, chain_before=before,
                            position=pos, entry_id=entry.id, existed=True, old_value=entry.value)

    def clear(self) -> None:
        self.buckets = [[] for _ in range(self.bucket_count)]

    def __len__(self) -> int:
        return sum(len(b) for b in self.buckets)

    def to_dict(self) -> dict:
        return {
            "bucket_count": self.bucket_count,
            "buckets": [
                {"index": i, "items": [e.to_dict() for e in chain]}
                for i, chain in enumerate(self.buckets)
            ],
        }


class HashSet(ChainedBuckets):
    SAMPLE_VALUES = (15, 25, 35, 12, 22, 32, 18, 28)

    def add(self, key: int) -> HashMutation:
        bucket, pos = self.find(key)
        if pos is not None:
            entry = self.buckets[bucket][pos]
            return HashMutation(op="add", key=key, bucket=bucket, chain_before=self.keys_in(bucket),
                                position=pos, entry_id=entry.id, existed=True)
        mutation = self._append(key, None)
        mutation.op = "add"
        return mutation

    def contains(self, key: int) -> bool:
        return self.find(key)[1] is not None

    def load_sample(self) -> None:
        self.clear()
        for v in self.SAMPLE_VALUES:
            self.add(v)


class HashTable(ChainedBuckets):
    def put(self, key: int, value: Any) -> HashMutation:
        bucket, pos = self.find(key)
        if pos is not None:
            entry = self.buckets[bucket][pos]
            old = entry.value
            entry.value = value
            return HashMutation(op="put", key=key, bucket=bucket, chain_before=self.keys_in(bucket),
                                position=pos, entry_id=entry.id, existed=True,
                                old_value=old, value=value)
        mutation = self._append(key, value)
        mutation.op = "put"
        return mutation

    def get(self, key: int) -> Any:
        bucket, pos = self.find(key)
        if pos is None:
            return None
        return self.buckets[bucket][pos].value
