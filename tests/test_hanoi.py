import pytest

from recursia.hanoi import hanoi_moves, main


def _simulate(n, moves, rods="ABC"):
    pegs = {rod: [] for rod in rods}
    pegs[rods[0]] = list(range(n, 0, -1))
    for disk, from_rod, to_rod in moves:
        assert pegs[from_rod] and pegs[from_rod][-1] == disk
        assert not pegs[to_rod] or pegs[to_rod][-1] > disk
        pegs[to_rod].append(pegs[from_rod].pop())
    return pegs


def test_single_disk():
    assert list(hanoi_moves(1)) == [(1, "A", "C")]


def test_no_disks():
    assert list(hanoi_moves(0)) == []


@pytest.mark.parametrize("n", [1, 2, 3, 5, 7])
def test_moves_are_legal_and_complete(n):
    moves = list(hanoi_moves(n))
    pegs = _simulate(n, moves)
    assert pegs["C"] == list(range(n, 0, -1))
    assert pegs["A"] == [] and pegs["B"] == []


@pytest.mark.parametrize("n", [2, 3, 4])
def test_move_count_doubles_plus_one(n):
    assert len(list(hanoi_moves(n))) == 2 * len(list(hanoi_moves(n - 1))) + 1


def test_custom_rods():
    moves = list(hanoi_moves(3, "S", "H", "D"))
    pegs = _simulate(3, moves, rods="SHD")
    assert pegs["D"] == [3, 2, 1]


def test_negative_disks():
    with pytest.raises(ValueError):
        list(hanoi_moves(-1))


def _parse(out):
    moves = []
    for line in out.splitlines():
        words = line.split()
        assert words[:2] == ["Move", "disk"]
        moves.append((int(words[2]), words[4], words[6]))
    return moves


def test_main_with_argument(capsys):
    assert main(["3"]) == 0
    moves = _parse(capsys.readouterr().out)
    assert moves == list(hanoi_moves(3))


def test_main_reads_input(monkeypatch, capsys):
    monkeypatch.setattr("builtins.input", lambda prompt="": "2")
    assert main([]) == 0
    moves = _parse(capsys.readouterr().out)
    assert _simulate(2, moves)["C"] == [2, 1]