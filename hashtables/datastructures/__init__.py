from .hashing import hash_djb2, key_index
from .linked_list import Entry, LinkedList
from .order_list import OrderList
from .hash_map import HashTable, create, table_set, table_get, table_print, delete_table
from .sorted_hash_map import SortedHashTable, sorted_create, table_print_rev
from .render import format_pairs, print_pairs

__all__ = [
    "hash_djb2",
    "key_index",
    "Entry",
    "LinkedList",
    "OrderList",
    "HashTable",
    "SortedHashTable",
    "create",
    "sorted_create",
    "table_set",
    "table_get",
    "table_print",
    "table_print_rev",
    "delete_table",
    "format_pairs",
    "print_pairs",
]
