from scavenger_hunt.engine.game import GameConfig
from scavenger_hunt.engine.missions import RuleKind
from scavenger_hunt.simulator import BatchResult, Simulator


def test_run_batch_counts_add_up():
    batch = Simulator(seed=1).run_batch(rounds=500)
    assert batch.rounds == 500
    assert sum(batch.attempts.values()) == 500
    assert sum(batch.hand_sizes.values()) == 500
    assert set(batch.hand_sizes) <= {2, 3, 4, 5}
    assert 0 <= batch.wins <= 500


def test_same_seed_same_result():
    a = Simulator(seed=42).run_batch(rounds=300)
    b = Simulator(seed=42).run_batch(rounds=300)
    assert a.to_dict() == b.to_dict()


def test_odds_by_rule_covers_every_kind():
    batch = Simulator(seed=3).odds_by_rule(rounds_per_rule=200)
    assert batch.rounds == 200 * len(RuleKind)
    assert all(batch.attempts[k.name] == 200 for k in RuleKind)
    # Two-card minimum makes a pair of even ranks far likelier than three hearts exactly
    assert batch.rate(RuleKind.EVEN_RANK_PAIR) > batch.rate(RuleKind.EXACT_SUIT_COUNT)


def test_forced_hand_size_from_config():
    sim = Simulator(GameConfig(min_hand_size=2, max_hand_size=2), seed=5)
    batch = sim.run_batch(rounds=100, kinds=[RuleKind.EXACT_SUIT_COUNT, RuleKind.FLUSH])
    # Two cards can never hold three hearts or a 3-card flush
    assert batch.wins == 0
    assert batch.hand_sizes == {2: 200}


def test_batch_result_rate_and_report():
    result = BatchResult(rounds=4)
    result.record(RuleKind.RED_QUEEN, 3, True)
    result.record(RuleKind.RED_QUEEN, 3, False)
    result.record(RuleKind.JOKER_PRESENT, 5, False)
    result.record(RuleKind.JOKER_PRESENT, 2, False)

    assert result.rate(RuleKind.RED_QUEEN) == 50.0
    assert result.rate(RuleKind.FLUSH) == 0.0
    assert result.win_rate == 25.0
    assert "RED_QUEEN" in str(result)
    assert "FLUSH" not in str(result)
    assert result.to_dict()["rates"] == {"RED_QUEEN": 50.0, "JOKER_PRESENT": 0.0}
