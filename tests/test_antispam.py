from alita.antispam import SPAM_EXPIRY_NS, SPAM_LIMIT, AntiSpam, AntiSpamLevel


class _Clock:
    def __init__(self, now=10**18):
        self.now = now

    def __call__(self):
        return self.now


def test_under_limit_is_not_spam():
    spam = AntiSpam(clock=_Clock())
    results = [spam.spam_check(1) for _ in range(SPAM_LIMIT)]
    assert results == [False] * SPAM_LIMIT


def test_over_limit_is_spam():
    spam = AntiSpam(clock=_Clock())
    for _ in range(SPAM_LIMIT):
        spam.spam_check(1)
    assert spam.spam_check(1) is True
    assert spam.spam_check(1) is True


def test_chats_are_independent():
    spam = AntiSpam(clock=_Clock())
    for _ in range(SPAM_LIMIT + 1):
        spam.spam_check(1)
    assert spam.spam_check(2) is False


def test_window_expiry_resets():
    clock = _Clock()
    spam = AntiSpam(clock=clock)
    for _ in range(SPAM_LIMIT + 1):
        spam.spam_check(1)
    clock.now += SPAM_EXPIRY_NS
    assert spam.spam_check(1) is False


def test_first_call_registers_without_spam():
    spam = AntiSpam(clock=_Clock())
    level = AntiSpamLevel(curr_time=0, limit=1, expiry=SPAM_EXPIRY_NS)
    assert spam.check_spammed(5, [level]) is False
    assert level.count == 0


def test_any_spammed_level_counts():
    clock = _Clock()
    spam = AntiSpam(clock=clock)
    levels = [
        AntiSpamLevel(curr_time=clock.now, limit=100, expiry=SPAM_EXPIRY_NS),
        AntiSpamLevel(curr_time=clock.now, limit=1, expiry=SPAM_EXPIRY_NS),
    ]
    spam.check_spammed(3, levels)
    assert spam.check_spammed(3, levels) is True


def test_registered_levels_are_copied():
    clock = _Clock()
    spam = AntiSpam(clock=clock)
    level = AntiSpamLevel(curr_time=clock.now, limit=100, expiry=SPAM_EXPIRY_NS)
    spam.check_spammed(4, [level])
    spam.check_spammed(4, [level])
    assert level.count == 0