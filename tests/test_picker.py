from collections import Counter
import random
import pytest
from seisen.models import NoteStore
from seisen.picker import NotePicker, SENTINEL


def make_store(notes):
    store = NoteStore()
    for note in notes:
        store.append(note)
    return store


def test_empty_store_returns_sentinel():
    picker = NotePicker(NoteStore())
    assert picker.get_note() == SENTINEL == 'No note available'
    assert picker.get_note() == SENTINEL


def test_custom_sentinel():
    picker = NotePicker(NoteStore(), sentinel='Aucune note disponible')
    assert picker.get_note() == 'Aucune note disponible'


def test_empty_store_does_not_draw(mocker):
    rng = random.Random()
    randrange = mocker.spy(rng, 'randrange')
    NotePicker(NoteStore(), rng).get_note()
    randrange.assert_not_called()


def test_returns_stored_notes():
    notes = ['Believe in yourself', 'Take a break', 'You did great']
    picker = NotePicker(make_store(notes))
    for _ in range(100):
        assert picker.get_note() in notes


def test_uniform():
    notes = ['Believe in yourself', 'Take a break', 'You did great']
    picker = NotePicker(make_store(notes), seed=1234)
    counts = Counter(picker.get_note() for _ in range(10000))
    assert set(counts) == set(notes)
    for note in notes:
        assert 0.30 < counts[note] / 10000 < 0.37


def test_seed_is_reproducible():
    store = make_store(str(i) for i in range(50))
    a = NotePicker(store, seed=42)
    b = NotePicker(store, seed=42)
    assert [a.get_note() for _ in range(20)] == [b.get_note() for _ in range(20)]


def test_uses_given_rng(mocker):
    rng = random.Random()
    mocker.patch.object(rng, 'randrange', return_value=1)
    picker = NotePicker(make_store(['a', 'b', 'c']), rng)
    assert picker.get_note() == 'b'
    rng.randrange.assert_called_once_with(3)


def test_rng_and_seed_exclusive():
    with pytest.raises(ValueError):
        NotePicker(NoteStore(), random.Random(), seed=1)


def test_sees_notes_added_later():
    store = NoteStore()
    picker = NotePicker(store)
    assert picker.get_note() == SENTINEL
    store.append('late')
    assert picker.get_note() == 'late'


def test_does_not_touch_global_random(mocker):
    randrange = mocker.patch('random.randrange')
    picker = NotePicker(make_store(['a', 'b']), seed=5)
    picker.get_note()
    randrange.assert_not_called()
