from adc.domain.entities.percept_log import PerceptLog


def test_new_log_is_empty() -> None:
    log: PerceptLog[str] = PerceptLog()

    assert len(log) == 0
    assert log.as_sequence() == ()


def test_append_preserves_arrival_order() -> None:
    log: PerceptLog[str] = PerceptLog()

    log.append("sunny")
    log.append("rainy")
    log.append("sunny")

    assert len(log) == 3
    assert log.as_sequence() == ("sunny", "rainy", "sunny")


def test_as_sequence_returns_snapshot_without_side_effect() -> None:
    log: PerceptLog[str] = PerceptLog()
    log.append("sunny")

    before = log.as_sequence()
    log.as_sequence()
    log.append("rainy")

    assert before == ("sunny",)
    assert len(log) == 2
    assert log.as_sequence()[: len(before)] == before
