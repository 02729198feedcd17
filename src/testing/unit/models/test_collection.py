from searchdsl.models import KeyedCollection


def test_auto_keys_are_sequential():
    collection = KeyedCollection(prefix="sort_")

    assert collection.add("a") == "sort_0"
    assert collection.add("b") == "sort_1"
    assert collection.to_mapping() == {"sort_0": "a", "sort_1": "b"}


def test_auto_key_skips_caller_keys():
    collection = KeyedCollection()
    collection.add("user", "_0")

    key = collection.add("auto")

    assert key == "_1"
    assert collection.get("_0") == "user"
    assert len(collection) == 2


def test_keyed_insert_keeps_position():
    collection = KeyedCollection()
    collection.add("first", "a")
    collection.add("second", "b")
    collection.add("replaced", "a")

    assert list(collection.items()) == [("a", "replaced"), ("b", "second")]


def test_remove_and_truthiness():
    collection = KeyedCollection()
    assert not collection

    collection.add("x", "k")
    assert "k" in collection

    assert collection.remove("k") == "x"
    assert collection.remove("k") is None
    assert not collection
