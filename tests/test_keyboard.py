from kernlib.keyboard import (
    INVARIANT_KEYMAP,
    SHIFTED_KEYMAP,
    UNSHIFTED_KEYMAP,
    Keyboard,
    map_key,
)


def drain(kb):
    out = []
    while not kb.buffer.empty():
        out.append(kb.buffer.getc())
    return bytes(out)


def test_map_key_hits_and_misses():
    assert map_key(INVARIANT_KEYMAP, 0x1E) == ord("A")
    assert map_key(UNSHIFTED_KEYMAP, 0x02) == ord("1")
    assert map_key(SHIFTED_KEYMAP, 0x02) == ord("!")
    assert map_key(INVARIANT_KEYMAP, 0x3B) is None


def test_plain_letter_is_lower_case():
    kb = Keyboard()
    assert kb.feed(bytes([0x1E, 0x9E])) == b"a"
    assert drain(kb) == b"a"


def test_shift_gives_upper_case_and_symbols():
    kb = Keyboard()
    assert kb.feed(bytes([0x2A, 0x1E, 0x02])) == b"A!"
    assert kb.feed(bytes([0xAA, 0x1E, 0x02])) == b"a1"


def test_caps_lock_toggles_on_press_only():
    kb = Keyboard()
    kb.feed(bytes([0x3A, 0xBA]))
    assert kb.caps_lock is True
    assert kb.feed(bytes([0x1E])) == b"A"
    assert kb.feed(bytes([0x2A, 0x1E])) == b"a"


def test_ctrl_letter_gives_control_code():
    kb = Keyboard()
    assert kb.feed(bytes([0x1D, 0x1E])) == b"\x01"


def test_right_ctrl_via_prefix_split_across_feeds():
    kb = Keyboard()
    assert kb.feed(b"\xe0") == b""
    assert kb.feed(b"\x1d") == b""
    assert kb.feed(b"\x1e") == b"\x01"
    kb.feed(b"\xe0\x9d")
    assert kb.feed(b"\x1e") == b"a"


def test_alt_sets_high_bit():
    kb = Keyboard()
    assert kb.feed(bytes([0x38, 0x1E])) == bytes([ord("a") | 0x80])


def test_release_and_unknown_keys_produce_nothing():
    kb = Keyboard()
    assert kb.feed(bytes([0x9E, 0x3B])) == b""
    assert kb.buffer.empty()


def test_ctrl_alt_delete_reboots():
    calls = []
    kb = Keyboard(on_reboot=lambda: calls.append(True))
    assert kb.feed(bytes([0x1D, 0x38, 0x53])) == b""
    assert calls == [True]


def test_delete_alone_is_buffered():
    kb = Keyboard()
    assert kb.feed(bytes([0x53])) == b"\x7f"


def test_full_buffer_drops_keys():
    kb = Keyboard()
    typed = kb.feed(bytes([0x1E] * 100))
    assert kb.buffer.full()
    assert kb.key_count == len(typed) == len(drain(kb))
    assert len(typed) < 100


def test_stats_counts_keys():
    kb = Keyboard()
    kb.feed(bytes([0x1E, 0x30]))
    assert kb.stats() == "Keyboard: 2 keys pressed"