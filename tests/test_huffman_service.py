import os
import sys
import random
import logging
import pytest

# Add the project root to path
REPO_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
if REPO_ROOT not in sys.path:
	sys.path.insert(0, REPO_ROOT)

IMPORT_ERROR = None
hs = None
stats = None
try:
	import huffman_codebook.huffman_service as hs
	import huffman_codebook.stats as stats
except Exception as e:
	IMPORT_ERROR = e

EXAMPLE_TEXT = "       aaaaeeeefffhhiimmnnssttloprux"


def _get_service(**options):
	if IMPORT_ERROR:
		pytest.skip(f"cannot import huffman_codebook modules: {IMPORT_ERROR}")
	return hs.HuffmanService(**options)


def _assert_valid(codes, data):
	assert set(codes) == set(data)
	assert stats.is_prefix_free(codes)
	# the single one-bit code of a one-symbol text leaves half the tree unused
	expected_kraft = 1.0 if len(codes) > 1 else 0.5
	assert stats.kraft_sum(codes) == pytest.approx(expected_kraft)


def test_modules_and_classes_present():
	assert IMPORT_ERROR is None
	assert hasattr(hs, 'HuffmanService')
	assert hasattr(hs, 'Codebook')


def test_service_initializes_logic_attribute():
	svc = _get_service()
	assert svc.logic is not None
	assert svc.logic.tie_break == "insertion"
	assert svc.use_probabilities is False


def test_service_rejects_unknown_tie_break():
	with pytest.raises(ValueError):
		_get_service(tie_break="whatever")


def test_empty_input_returns_empty_codebook():
	svc = _get_service()
	book = svc.codebook("")
	assert book.total == 0
	assert book.root is None
	assert book.codes == {}
	assert book.probabilities == {}
	assert svc.code_table("") == {}
	assert svc.code_table(b"") == svc.code_table(b"")


def test_describe_empty_input_raises():
	svc = _get_service()
	with pytest.raises(ZeroDivisionError):
		svc.describe("")


def test_single_byte_repeated():
	svc = _get_service()
	assert svc.code_table(b'A' * (1024 * 10)) == {65: "0"}


def test_all_bytes_once():
	svc = _get_service()
	codes = svc.code_table(bytes(range(256)))
	_assert_valid(codes, bytes(range(256)))
	assert all(len(code) == 8 for code in codes.values())


def test_random_bytes_10kb():
	svc = _get_service()
	data = bytes(random.getrandbits(8) for _ in range(10 * 1024))
	_assert_valid(svc.code_table(data), data)


def test_small_inputs():
	svc = _get_service()
	for n in (1, 2, 3):
		data = bytes(random.getrandbits(8) for _ in range(n))
		_assert_valid(svc.code_table(data), data)


def test_codebook_pipeline():
	svc = _get_service()
	book = svc.codebook("aab")
	assert book.counts == {"a": 2, "b": 1}
	assert book.total == 3
	assert book.probabilities["a"] == pytest.approx(2 / 3)
	assert book.root.weight == 3
	assert sorted(book.codes.values()) == ["0", "1"]


@pytest.mark.parametrize("tie_break", ["insertion", "label"])
def test_probability_weights(tie_break):
	svc = _get_service(tie_break=tie_break, use_probabilities=True)
	book = svc.codebook(EXAMPLE_TEXT)
	assert book.root.weight == pytest.approx(1.0)
	_assert_valid(book.codes, EXAMPLE_TEXT)
	for a in book.counts:
		for b in book.counts:
			if book.counts[a] > book.counts[b]:
				assert len(book.codes[a]) <= len(book.codes[b])


def test_describe_example():
	svc = _get_service()
	summary = svc.describe(EXAMPLE_TEXT)
	assert summary.symbols == 16
	assert summary.total == 36
	assert summary.average_length == pytest.approx(135 / 36)
	assert summary.kraft_sum == pytest.approx(1.0)
	assert 0.9 < summary.efficiency <= 1.0


def test_codes_identical_across_services():
	a = _get_service().code_table(EXAMPLE_TEXT)
	b = _get_service().code_table(EXAMPLE_TEXT)
	assert a == b


def test_codebook_build_is_logged(caplog):
	svc = _get_service()
	with caplog.at_level(logging.DEBUG, logger="huffman_codebook.huffman_service"):
		svc.codebook(EXAMPLE_TEXT)
	assert "16 symbols" in caplog.text
	assert "tie-break insertion" in caplog.text


@pytest.mark.timeout(120)
def test_performance_1mb():
	svc = _get_service()
	data = bytes(random.getrandbits(8) for _ in range(1024 * 1024))
	codes = svc.code_table(data)
	assert len(codes) == len(set(data))
