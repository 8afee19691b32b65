import pytest

from arraydrills.collection import Collectable, NaiveVector, VectorError, main


def test_vector_init():
    vector = NaiveVector()
    assert len(vector) == 0
    assert vector.capacity == 0


def test_vector_add():
    vector = NaiveVector()
    vector.add(1)
    assert len(vector) == 1


def test_vector_add_capacity():
    vector = NaiveVector()
    vector.add(1)
    vector.add(2)
    assert len(vector) == 2
    assert vector.capacity == 2


def test_vector_capacity_doubles():
    vector = NaiveVector()
    for value in range(5):
        vector.add(value)
    assert len(vector) == 5
    assert vector.capacity == 8


def test_vector_remove_keeps_length():
    vector = NaiveVector()
    vector.add(7)
    vector.remove(7)
    assert len(vector) == 1


def test_vector_error_message():
    assert str(VectorError()) == "Vector Error"


def test_collectable_is_abstract():
    with pytest.raises(TypeError):
        Collectable()


def test_main_prints_greeting(capsys):
    assert main() == 0
    assert capsys.readouterr().out == "Hello, world!\n"