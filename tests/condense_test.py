import logging

from spellcards.condense import NoOpCondenser, prepare_cards
from spellcards.models import Record

LONG = "Alpha beta gamma delta epsilon. " + "Zeta eta theta iota kappa lambda mu nu xi omicron pi. " * 3


class FixedCondenser:
    def __init__(self, text):
        self.text = text
        self.seen = []

    def condense(self, record):
        self.seen.append(record.name)
        return self.text


class BrokenCondenser:
    def condense(self, record):
        raise ConnectionError("endpoint unreachable")


def test_without_condenser_cards_are_the_plain_split(make_splitter):
    splitter = make_splitter(60.0)
    record = Record(name="X", description=LONG)
    assert prepare_cards([record], splitter) == splitter.split_if_needed(record)
    assert prepare_cards([record], splitter, NoOpCondenser()) == splitter.split_if_needed(record)


def test_shorter_condensed_text_is_used(make_splitter):
    condenser = FixedCondenser("Alpha beta. Zeta eta.")
    cards = prepare_cards([Record(name="X", description=LONG)], make_splitter(60.0), condenser)
    assert len(cards) == 1
    assert cards[0].description == "Alpha beta. Zeta eta."
    assert cards[0].part == ""


def test_condensed_text_not_saving_cards_is_ignored(make_splitter):
    splitter = make_splitter(60.0)
    record = Record(name="X", description=LONG)
    cards = prepare_cards([record], splitter, FixedCondenser(LONG + " More words here."))
    assert cards == splitter.split_if_needed(record)


def test_single_card_records_are_not_condensed(make_splitter):
    condenser = FixedCondenser("x")
    cards = prepare_cards([Record(name="Short", description="Tiny.")], make_splitter(60.0), condenser)
    assert condenser.seen == []
    assert [c.description for c in cards] == ["Tiny."]


def test_empty_condensed_text_keeps_original(make_splitter):
    splitter = make_splitter(60.0)
    record = Record(name="X", description=LONG)
    assert prepare_cards([record], splitter, FixedCondenser("   ")) == splitter.split_if_needed(record)


def test_failing_condenser_falls_back_and_warns(make_splitter, caplog):
    splitter = make_splitter(60.0)
    record = Record(name="X", description=LONG)
    with caplog.at_level(logging.WARNING):
        cards = prepare_cards([record], splitter, BrokenCondenser())
    assert cards == splitter.split_if_needed(record)
    assert "endpoint unreachable" in caplog.text
