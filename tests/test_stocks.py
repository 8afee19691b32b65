from arraydrills.stocks import max_profit, max_profit_twice


def test_max_profit_basic():
    assert max_profit([7, 1, 5, 3, 6, 4]) == 5


def test_max_profit_none():
    assert max_profit([7, 6, 4, 3, 1]) == 0


def test_max_profit_empty():
    assert max_profit([]) == 0


def test_max_profit_twice():
    assert max_profit_twice([3, 3, 5, 0, 0, 3, 1, 4]) == 6


def test_max_profit_twice_basic():
    assert max_profit_twice([10, 22, 5, 75, 65, 80]) == 87


def test_max_profit_twice_short():
    assert max_profit_twice([5]) == 0


def test_max_profit_twice_falling():
    assert max_profit_twice([9, 7, 4, 1]) == 0


def test_two_trades_at_least_one_trade():
    prices = [2, 9, 1, 4, 8, 3, 7]
    assert max_profit_twice(prices) >= max_profit(prices)