"""
functional interface: one plain function per operation.

every function takes the sequence as its first argument and returns plain
python values (lists, tuples, dicts) instead of enumerables. callables receive
(index, item) unless documented otherwise. inputs are never modified, except by
``delete_at`` on a list, which edits the list in place unless ``copy=True``.
"""
from .types import *
from .factories import from_iterable, repeat as _repeat
from .dynamic import DynamicSequence
from .extensions.edit import delete_bounds

# --- scanning ---

def contains(seq: Iterable[T], target: T) -> bool:
    return from_iterable(seq).scan.contains(target)

def contains_by(seq: Iterable[T], predicate: ItemPredicate[T]) -> bool:
    """predicate receives the item only"""
    return from_iterable(seq).scan.contains_by(predicate)

def contains_subsequence(seq: Iterable[T], sub: Iterable[T]) -> bool:
    return from_iterable(seq).scan.contains_subsequence(sub)

def find(seq: Iterable[T], predicate: Predicate[T]) -> Found[T]:
    return from_iterable(seq).scan.find(predicate)

def find_last(seq: Iterable[T], predicate: Predicate[T]) -> Found[T]:
    return from_iterable(seq).scan.find_last(predicate)

# --- transform & reduce ---

def map(seq: Iterable[T], iteratee: Iteratee[T, U]) -> List[U]:
    return from_iterable(seq).map(iteratee).to.list()

def filter(seq: Iterable[T], predicate: Predicate[T]) -> List[T]:
    return from_iterable(seq).filter(predicate).to.list()

def filter_map(seq: Iterable[T], iteratee: FilterIteratee[T, U]) -> List[U]:
    return from_iterable(seq).filter_map(iteratee).to.list()

def flat_map(seq: Iterable[T], iteratee: Iteratee[T, Iterable[U]]) -> List[U]:
    return from_iterable(seq).flat_map(iteratee).to.list()

def reduce(seq: Iterable[T], combiner: Combiner[T], initial: T) -> T:
    return from_iterable(seq).to.reduce(combiner, initial)

def reduce_by(seq: Iterable[T], initial: U, reducer: Reducer[T, U]) -> U:
    return from_iterable(seq).to.reduce_by(initial, reducer)

def reduce_right(seq: Iterable[T], initial: U, reducer: Reducer[T, U]) -> U:
    return from_iterable(seq).to.reduce_right(initial, reducer)

def every(seq: Iterable[T], predicate: Predicate[T]) -> bool:
    return from_iterable(seq).to.every(predicate)

def none(seq: Iterable[T], predicate: Predicate[T]) -> bool:
    return from_iterable(seq).to.none(predicate)

def some(seq: Iterable[T], predicate: Predicate[T]) -> bool:
    return from_iterable(seq).to.some(predicate)

def count(seq: Iterable[T], item: T) -> int:
    return from_iterable(seq).to.count(item)

def count_by(seq: Iterable[T], predicate: Predicate[T]) -> int:
    return from_iterable(seq).to.count_by(predicate)

def difference(seq: Iterable[T], excluded: Iterable[T]) -> List[T]:
    return from_iterable(seq).set.difference(excluded).to.list()

def difference_by(seq: Iterable[T], excluded: Iterable[T], iteratee: Iteratee[T, K]) -> List[T]:
    return from_iterable(seq).set.difference_by(excluded, iteratee).to.list()

# --- structural ---

def chunk(seq: Iterable[T], size: int) -> List[List[T]]:
    return from_iterable(seq).group.chunk(size).to.list()

def compact(seq: Iterable[T]) -> List[T]:
    return from_iterable(seq).edit.compact().to.list()

def concat(seq: Iterable[T], *more: Iterable[T]) -> List[T]:
    return from_iterable(seq).set.concat(*more).to.list()

def replace(seq: Iterable[T], old: T, new: T, n: int) -> List[T]:
    return from_iterable(seq).edit.replace(old, new, n).to.list()

def replace_all(seq: Iterable[T], old: T, new: T) -> List[T]:
    return from_iterable(seq).edit.replace_all(old, new).to.list()

def repeat(item: T, n: int) -> List[T]:
    return _repeat(item, n).to.list()

def delete_at(seq: List[T], start: int, end: Optional[int] = None, copy: bool = False) -> List[T]:
    """
    remove the half-open range [start, end) from seq.

    the returned list may be seq itself: a list input is edited in place and
    returned, and no-op calls hand back the input object. pass copy=True for a
    result that is independent of seq.
    """
    if copy or not isinstance(seq, list):
        return from_iterable(seq).edit.delete_at(start, end).to.list()
    bounds = delete_bounds(len(seq), start, end)
    if bounds is not None:
        lo, hi = bounds
        del seq[lo:hi]
    return seq

def drop(seq: Sequence[T], n: int) -> Sequence[T]:
    """a non-positive n returns seq itself"""
    if n <= 0: return seq
    return from_iterable(seq).edit.drop(n).to.list()

def drop_right(seq: Sequence[T], n: int) -> Sequence[T]:
    """a non-positive n returns seq itself"""
    if n <= 0: return seq
    return from_iterable(seq).edit.drop_right(n).to.list()

def drop_while(seq: Iterable[T], predicate: ItemPredicate[T]) -> List[T]:
    """predicate receives the item only"""
    return from_iterable(seq).edit.drop_while(predicate).to.list()

def drop_right_while(seq: Iterable[T], predicate: ItemPredicate[T]) -> List[T]:
    """predicate receives the item only"""
    return from_iterable(seq).edit.drop_right_while(predicate).to.list()

# --- dynamic flattening & coercion ---

def flatten_one_level(seq: Any, annotation: Any = None) -> DynamicSequence:
    """
    unwrap one level of nesting of a dynamic sequence (raw input is converted first).
    the outer element type must be a sequence or Any; for any other element type
    the result is an empty sequence rather than an error.
    """
    return DynamicSequence.of(seq, annotation).flatten()

def flatten_deep(seq: Any, annotation: Any = None) -> DynamicSequence:
    return DynamicSequence.of(seq, annotation).flatten_deep()

def to_opaque_slice(seq: Any) -> Optional[List[Any]]:
    """None for the nil sequence"""
    return DynamicSequence.of(seq).to_opaque_slice()

def to_string_slice(seq: Any) -> List[str]:
    """raises InvalidElementTypeError on the first element that is not a str"""
    return DynamicSequence.of(seq).to_string_slice()

def to_int_slice(seq: Any) -> List[int]:
    """raises InvalidElementTypeError on the first element that is not an int"""
    return DynamicSequence.of(seq).to_int_slice()

# --- equality & grouping ---

def equal(seq1: Iterable[T], seq2: Iterable[T]) -> bool:
    return from_iterable(seq1).to.equal(seq2)

def equal_with(seq1: Iterable[T], seq2: Iterable[U], comparator: Comparator[T, U]) -> bool:
    return from_iterable(seq1).to.equal_with(seq2, comparator)

def partition_by(seq: Iterable[T], predicate: Predicate[T]) -> Tuple[List[T], List[T]]:
    return from_iterable(seq).group.partition_by(predicate)

def group_with(seq: Iterable[T], key_selector: KeySelector[T, K]) -> Dict[K, List[T]]:
    """key_selector receives the item only"""
    return from_iterable(seq).group.group_with(key_selector)

# --- iteration ---

def for_each(seq: Iterable[T], iteratee: Callable[[int, T], Any]) -> None:
    from_iterable(seq).util.for_each(iteratee)

def for_each_with_break(seq: Iterable[T], iteratee: Callable[[int, T], bool]) -> None:
    from_iterable(seq).util.for_each_with_break(iteratee)
