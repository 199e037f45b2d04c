from skyrunner.score import DIGIT_POSITIONS, ScoreCounter


def _as_text(counter):
    return "".join(str(digit) for digit in counter.visible_digits())


def test_new_counter_shows_zero():
    assert ScoreCounter().visible_digits() == (0,)


def test_visible_digits_read_as_decimal_count():
    counter = ScoreCounter()
    for n in range(1, 12001):
        counter.tick()
        assert _as_text(counter) == str(n)


def test_digits_stay_in_range():
    counter = ScoreCounter()
    for _ in range(1234):
        counter.tick()
        assert all(0 <= digit <= 9 for digit in counter.digits)


def test_five_digits_after_ten_thousand():
    counter = ScoreCounter()
    for _ in range(10000):
        counter.tick()
    assert len(counter.visible_digits()) == len(DIGIT_POSITIONS)
    assert _as_text(counter) == "10000"


def test_wraps_after_all_places_full():
    counter = ScoreCounter()
    for _ in range(100000):
        counter.tick()
    assert counter.visible_digits() == (0, 0, 0, 0, 0)


def test_reset_returns_to_zero():
    counter = ScoreCounter()
    for _ in range(150):
        counter.tick()
    counter.reset()
    assert counter.carries == 0
    assert counter.visible_digits() == (0,)