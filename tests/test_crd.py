from operatorkit.crd import CONDITION_TRUE, ESTABLISHED, established


def _crd(*conditions):
    return {"metadata": {"name": "widgets.example.com"}, "status": {"conditions": list(conditions)}}


def test_established_condition_true():
    crd = _crd(
        {"type": "NamesAccepted", "status": "True"},
        {"type": ESTABLISHED, "status": CONDITION_TRUE},
    )
    assert established(crd) is True


def test_established_condition_false():
    assert established(_crd({"type": "Established", "status": "False"})) is False


def test_other_true_condition_is_not_enough():
    assert established(_crd({"type": "NamesAccepted", "status": "True"})) is False


def test_missing_status_is_not_established():
    assert established({"metadata": {"name": "widgets.example.com"}}) is False
    assert established({"status": None}) is False