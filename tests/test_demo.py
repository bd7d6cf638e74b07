from bikeshop.config import ShopConfig
from bikeshop.demo import print_spares, run_demo
from bikeshop.domain.part import Part


def test_print_spares_prints_size_then_spares(capsys, mountain_config):
    spares = print_spares(mountain_config, size="M")

    out = capsys.readouterr().out.splitlines()
    assert out == ["M", "chain: 11-speed", "tire_size: 2.1", "front_shock: Manitou"]
    assert spares == [Part("chain", "11-speed"), Part("tire_size", "2.1"), Part("front_shock", "Manitou")]


def test_run_demo(capsys):
    results = run_demo(ShopConfig(log_level="WARNING"))

    assert [part.name for part in results["road_spares"]] == ["chain", "tire_size", "tape_color"]
    assert [part.name for part in results["mountain_spares"]] == ["chain", "tire_size", "front_shock"]
    assert results["greeting"] == "Hello Sarah!"
    assert results["diameters"] == [662, 668]
    assert results["moves"] == ["lumbering", "crabwalking"]

    out = capsys.readouterr().out
    assert "Road bike spares:" in out
    assert "tape_color: red" in out
    assert "rear_shock" not in out
    assert "Gear ratio: 4.73" in out
