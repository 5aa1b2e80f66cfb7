"""Tests for the analytics accumulator."""

from chat_analytics.analytics import EMPTY_ANALYTICS, AnalyticsAccumulator, aggregate
from chat_analytics.classify import CallDirection, CallEvent, Category, MessageUnit
from chat_analytics.config import AnalysisSettings


def _text(words, is_self=False, sent_at=""):
    return MessageUnit(category=Category.TEXT, is_self=is_self, word_count=words, sent_at=sent_at)


def _call(direction, seconds, is_self=False):
    return MessageUnit(
        category=Category.CALL,
        is_self=is_self,
        call=CallEvent(direction=direction, duration_seconds=seconds),
    )


def test_no_units_gives_empty_record():
    record = aggregate([])
    assert record == EMPTY_ANALYTICS
    assert record.avg_message_length == 0
    assert record.average_call_duration == 0
    assert record.reply_rate == 0


def test_short_and_long_are_disjoint():
    units = [_text(n) for n in (0, 1, 5, 6, 49, 50)] + [_text(80, is_self=True)]
    record = aggregate(units)
    assert record.short_replies == 2
    assert record.long_messages_received == 1
    assert record.long_messages_sent == 1
    assert record.total_messages == 7


def test_average_length_skips_empty_and_media():
    units = [
        _text(4),
        _text(0),
        MessageUnit(category=Category.IMAGE, is_self=True),
        _text(8),
    ]
    assert aggregate(units).avg_message_length == 6.0


def test_calls_stay_out_of_message_counts():
    units = [
        _text(2, is_self=True),
        _call(CallDirection.OUTGOING, 323, is_self=True),
        _call(CallDirection.INCOMING, 0),
    ]
    record = aggregate(units)
    assert record.total_messages == 1
    assert record.messages_sent + record.messages_received == record.total_messages
    assert record.outgoing_calls == 1
    assert record.incoming_calls == 1
    assert record.total_call_duration == 323
    assert record.average_call_duration == 161.5


def test_call_without_event_uses_authorship():
    record = aggregate([
        MessageUnit(category=Category.CALL, is_self=True),
        MessageUnit(category=Category.CALL, is_self=False),
    ])
    assert record.outgoing_calls == 1
    assert record.incoming_calls == 1
    assert record.total_call_duration == 0


def test_media_counters():
    record = aggregate([
        MessageUnit(category=Category.IMAGE, is_self=True),
        MessageUnit(category=Category.IMAGE, is_self=False),
        MessageUnit(category=Category.STICKER, is_self=False),
        MessageUnit(category=Category.STICKER, is_self=False),
    ])
    assert (record.images_sent, record.images_received) == (1, 1)
    assert (record.stickers_sent, record.stickers_received) == (0, 2)
    assert record.messages_sent == 1
    assert record.messages_received == 3
    assert record.short_replies == 0


def test_reply_rate():
    units = [
        _text(3, is_self=True),  # answered
        _text(3),
        _text(3, is_self=True),  # followed by another own message
        _text(3, is_self=True),  # answered by a call
        _call(CallDirection.INCOMING, 10),
        _text(3, is_self=True),  # last unit, nobody answered
    ]
    record = aggregate(units)
    assert record.messages_sent == 4
    assert record.reply_rate == 0.5
    assert 0 <= record.reply_rate <= 1


def test_reply_rate_without_sent_messages():
    assert aggregate([_text(3), _text(4)]).reply_rate == 0


def test_custom_thresholds():
    settings = AnalysisSettings(short_reply_max_words=2, long_message_min_words=10)
    record = aggregate([_text(2), _text(3), _text(10)], settings)
    assert record.short_replies == 1
    assert record.long_messages_received == 1


def test_message_date_range():
    record = aggregate([
        _text(1, sent_at="2023-02-01T10:00:00"),
        _text(1),
        _text(1, sent_at="2023-02-01T11:30:00"),
    ])
    assert record.first_message_at == "2023-02-01T10:00:00"
    assert record.last_message_at == "2023-02-01T11:30:00"


def test_accumulator_counts_units():
    accumulator = AnalyticsAccumulator()
    accumulator.add(_call(CallDirection.INCOMING, 5))
    assert accumulator.units_seen == 1
    assert accumulator.finish().total_messages == 0


def test_record_to_dict():
    data = aggregate([_text(2)]).to_dict()
    assert data["total_messages"] == 1
    assert data["short_replies"] == 1
    assert set(data) >= {"reply_rate", "avg_message_length", "average_call_duration"}
