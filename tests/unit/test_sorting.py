"""
Unit tests - encoded text must sort in the same order as the original bytes
"""

import base64
import itertools
import random

from sortable_b64 import (
  decode,
  decode_no_padding,
  decode_uint,
  decode_uint_no_padding,
  encode,
  encode_no_padding,
  encode_uint,
  encode_uint_no_padding,
)

SORT_CASES = [f"{i:03d}" for i in range(1000)]

UINT_CASES = [0, 1, 2, 42, 255, 256, 65535, 65536, 1234567890, 1 << 32, (1 << 63) - 1, 1 << 63, (1 << 64) - 1]


def _sort_through(encoder, decoder, values):
  """Sorts the encoded forms, then decodes them back in that order"""
  return [decoder(e) for e in sorted(encoder(v) for v in values)]


def test_sorting_cases_are_strong_enough():
  """Plain base64url must break on these cases, otherwise they prove nothing"""
  sort_before = sorted(SORT_CASES)
  sort_after = _sort_through(
    lambda s: base64.urlsafe_b64encode(s.encode()).decode(),
    lambda e: base64.urlsafe_b64decode(e).decode(),
    SORT_CASES,
  )
  assert sort_before != sort_after, "sorting consistency test cases are too weak"


def test_sorting_consistency():
  sort_after = _sort_through(lambda s: encode(s.encode()), lambda e: decode(e).decode(), SORT_CASES)
  assert sort_after == sorted(SORT_CASES)


def test_sorting_consistency_no_padding():
  sort_after = _sort_through(
    lambda s: encode_no_padding(s.encode()), lambda e: decode_no_padding(e).decode(), SORT_CASES
  )
  assert sort_after == sorted(SORT_CASES)


def test_every_single_byte_sorts():
  values = [bytes([b]) for b in range(256)]
  assert [encode(v) for v in values] == sorted(encode(v) for v in values)
  assert [encode_no_padding(v) for v in values] == sorted(encode_no_padding(v) for v in values)


def test_random_equal_length_inputs_sort():
  rng = random.Random(1234)
  for length in (1, 2, 3, 7, 16):
    values = [rng.randbytes(length) for _ in range(300)]
    assert _sort_through(encode, decode, values) == sorted(values)
    assert _sort_through(encode_no_padding, decode_no_padding, values) == sorted(values)


def test_no_padding_sorts_across_different_lengths():
  """Prefixes and mixed lengths, using few byte values so many inputs share prefixes"""
  values = [
    bytes(combo)
    for length in range(0, 6)
    for combo in itertools.product((0x00, 0x01, 0x7F, 0xFF), repeat=length)
  ]
  assert _sort_through(encode_no_padding, decode_no_padding, values) == sorted(values)


def test_padded_mode_only_sorts_equal_length_inputs():
  """'=' sits between '9' and 'A', above '-' and the digits"""
  assert b"\x00" < b"\x00\x00"
  assert encode(b"\x00") > encode(b"\x00\x00")
  assert encode_no_padding(b"\x00") < encode_no_padding(b"\x00\x00")


def test_big_endian_uint_sorting_consistency():
  assert _sort_through(encode_uint, decode_uint, reversed(UINT_CASES)) == sorted(UINT_CASES)
  assert _sort_through(encode_uint_no_padding, decode_uint_no_padding, reversed(UINT_CASES)) == sorted(UINT_CASES)


def test_little_endian_uint_round_trips_but_does_not_sort():
  encoded = [encode_uint(n, True) for n in UINT_CASES]
  assert [decode_uint(e, True) for e in encoded] == UINT_CASES
  assert encode_uint(1, True) > encode_uint(256, True)
  assert sorted(encoded) != encoded
