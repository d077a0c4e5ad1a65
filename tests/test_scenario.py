import pytest

from primer.bank.scenario import Scenario, run_scenario


def test_default_scenario_totals():
    bank = run_scenario(Scenario.default())
    assert [a.balance for a in bank] == [600, 1750]
    assert bank.total_balance() == 2350
    assert bank.summary()[0] == "Account 1: Holder: Alice, Balance: 600"


def test_from_yaml(tmp_path):
    p = tmp_path / "s.yaml"
    p.write_text(
        "name: Solo\n"
        "accounts:\n"
        "  - id: 7\n"
        "    holder: Carol\n"
        "    transactions:\n"
        "      - deposit: 50\n"
        "      - withdraw: 80\n"
        "      - withdraw: 20\n"
    )
    sc = Scenario.from_yaml(str(p))
    assert sc.name == "Solo"
    assert sc.accounts[0].transactions == (("deposit", 50), ("withdraw", 80), ("withdraw", 20))

    bank = run_scenario(sc)
    assert bank.get(7).balance == 30


@pytest.mark.parametrize(
    "accounts",
    [
        [{"id": "x", "holder": "A"}],
        [{"id": 1, "holder": ""}],
        [{"id": 1, "holder": "A", "transactions": [{"steal": 5}]}],
        [{"id": 1, "holder": "A", "transactions": [{"deposit": -5}]}],
        [{"id": 1, "holder": "A"}, {"id": 1, "holder": "B"}],
        [{"id": 1, "holder": "A", "transactions": 5}],
        [{"id": 1, "holder": "A", "transactions": True}],
    ],
)
def test_invalid_scenarios(accounts):
    with pytest.raises(ValueError):
        Scenario.from_dict({"accounts": accounts})


def test_non_mapping_file(tmp_path):
    p = tmp_path / "s.yaml"
    p.write_text("- just\n- a list\n")
    with pytest.raises(ValueError):
        Scenario.from_yaml(str(p))


def test_empty_name_rejected():
    with pytest.raises(ValueError, match="name"):
        Scenario.from_dict({"name": None, "accounts": []})


def test_scalar_transactions_in_yaml(tmp_path):
    p = tmp_path / "s.yaml"
    p.write_text("accounts:\n  - id: 1\n    holder: A\n    transactions: 5\n")
    with pytest.raises(ValueError, match="must be a list"):
        Scenario.from_yaml(str(p))


def test_rejected_withdrawals_are_reported():
    sc = Scenario.from_dict(
        {
            "accounts": [
                {"id": 1, "holder": "Alice", "transactions": [
                    {"deposit": 1000}, {"withdraw": 400}, {"withdraw": 1000},
                ]},
            ]
        }
    )
    rejected = []
    bank = run_scenario(sc, on_rejected=lambda *args: rejected.append(args))
    assert rejected == [(1, 1000, 600)]
    assert bank.get(1).balance == 600
