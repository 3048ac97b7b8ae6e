"""
Integration tests for the command-line interface
"""

import pytest
from click.testing import CliRunner
from blocksort.__main__ import cli
from blocksort.context.encoding import bwt_transform, encode_bytes

ABRA_BWT = b"\x00\x00\x00\x03ARD!RCAAAABB"


@pytest.fixture
def runner():
    return CliRunner()


class TestBurrowsWheelerCommand:
    """Test `blocksort bwt`"""

    def test_forward(self, runner, abra):
        result = runner.invoke(cli, ['bwt', '-'], input=abra)

        assert result.exit_code == 0
        assert result.stdout_bytes == ABRA_BWT

    def test_inverse(self, runner, abra):
        result = runner.invoke(cli, ['bwt', '+'], input=ABRA_BWT)

        assert result.exit_code == 0
        assert result.stdout_bytes == abra

    def test_naive_algorithm_from_env(self, runner, abra, monkeypatch):
        monkeypatch.setenv('BLOCKSORT_SUFFIX_ALGORITHM', 'naive')

        result = runner.invoke(cli, ['bwt', '-'], input=abra)

        assert result.exit_code == 0
        assert result.stdout_bytes == ABRA_BWT

    def test_invalid_env(self, runner, abra, monkeypatch):
        monkeypatch.setenv('BLOCKSORT_STRICT', 'sometimes')

        result = runner.invoke(cli, ['bwt', '-'], input=abra)

        assert result.exit_code == 2

    def test_files(self, runner, tmp_path, abra):
        """Test --input / --output instead of stdin / stdout"""
        source = tmp_path / "abra.txt"
        encoded = tmp_path / "abra.bwt"
        decoded = tmp_path / "abra.out"
        source.write_bytes(abra)

        first = runner.invoke(cli, ['bwt', '-', '-i', str(source), '-o', str(encoded)])
        second = runner.invoke(cli, ['bwt', '+', '-i', str(encoded), '-o', str(decoded)])

        assert first.exit_code == 0 and second.exit_code == 0
        assert encoded.read_bytes() == ABRA_BWT
        assert decoded.read_bytes() == abra

    def test_empty_input_rejected(self, runner):
        result = runner.invoke(cli, ['bwt', '-'], input=b"")

        assert result.exit_code == 1
        assert "empty" in result.output

    def test_corrupted_input(self, runner):
        result = runner.invoke(cli, ['bwt', '+'], input=b"\x00\x00\x00\x00ab")

        assert result.exit_code == 1
        assert "Error" in result.output

    def test_compat_decodes_corrupted_input(self, runner):
        result = runner.invoke(cli, ['bwt', '+', '--compat'], input=b"\x00\x00\x00\x00ab")

        assert result.exit_code == 0
        assert result.stdout_bytes == b"aa"

    def test_measure(self, runner, abra):
        result = runner.invoke(cli, ['bwt', '-', '--measure'], input=abra)

        assert result.exit_code == 0
        assert "First index" in result.output

    def test_rejected_input_keeps_existing_output(self, runner, tmp_path):
        """Test that an empty block leaves a pre-existing output file untouched"""
        target = tmp_path / "existing.bin"
        target.write_bytes(b"precious")

        result = runner.invoke(cli, ['bwt', '-', '-o', str(target)], input=b"")

        assert result.exit_code == 1
        assert target.read_bytes() == b"precious"

    def test_corrupted_input_creates_no_output(self, runner, tmp_path):
        """Test that a rejected decode does not leave an empty file behind"""
        target = tmp_path / "decoded.bin"

        result = runner.invoke(cli, ['bwt', '+', '-o', str(target)],
                               input=b"\x00\x00\x00\x00ab")

        assert result.exit_code == 1
        assert not target.exists()


class TestFlagHandling:
    """Test the '-' / '+' convention"""

    @pytest.mark.parametrize("command", ['bwt', 'mtf', 'pipeline'])
    def test_unknown_flag(self, runner, command):
        result = runner.invoke(cli, [command, 'x'], input=b"abc")

        assert result.exit_code == 2
        assert "Invalid value" in result.output

    @pytest.mark.parametrize("command", ['bwt', 'mtf', 'pipeline'])
    def test_missing_flag(self, runner, command):
        result = runner.invoke(cli, [command], input=b"abc")

        assert result.exit_code == 2


class TestMoveToFrontCommand:
    """Test `blocksort mtf`"""

    @pytest.mark.parametrize("option", [['--algorithm', 'naive'], ['--compat']])
    def test_rejects_block_sort_options(self, runner, abra, option):
        """Test that options mtf has no use for are not accepted"""
        result = runner.invoke(cli, ['mtf', '-'] + option, input=abra)

        assert result.exit_code == 2
        assert "No such option" in result.output

    def test_forward(self, runner, abra):
        result = runner.invoke(cli, ['mtf', '-'], input=abra)

        assert result.exit_code == 0
        assert result.stdout_bytes == encode_bytes(abra)

    def test_inverse(self, runner, abra):
        result = runner.invoke(cli, ['mtf', '+'], input=encode_bytes(abra))

        assert result.exit_code == 0
        assert result.stdout_bytes == abra

    def test_empty_stream(self, runner):
        result = runner.invoke(cli, ['mtf', '-'], input=b"")

        assert result.exit_code == 0
        assert result.stdout_bytes == b""


class TestPipelineCommand:
    """Test `blocksort pipeline`"""

    def test_round_trip(self, runner, tmp_path, text_block):
        source = tmp_path / "book.txt"
        packed = tmp_path / "book.bsp"
        source.write_bytes(text_block)

        forward = runner.invoke(cli, ['pipeline', '-', '-i', str(source), '-o', str(packed)])
        inverse = runner.invoke(cli, ['pipeline', '+', '-i', str(packed)])

        assert forward.exit_code == 0
        assert packed.read_bytes() == encode_bytes(bwt_transform(text_block))
        assert inverse.exit_code == 0
        assert inverse.stdout_bytes == text_block

    def test_measure(self, runner, tmp_path, text_block):
        packed = tmp_path / "book.bsp"

        result = runner.invoke(cli, ['pipeline', '-', '-m', '-o', str(packed)], input=text_block)

        assert result.exit_code == 0
        assert "Zero ranks" in result.output


class TestSuffixArrayCommand:
    """Test `blocksort csa`"""

    def test_abracadabra(self, runner):
        result = runner.invoke(cli, ['csa', 'ABRACADABRA!'])

        assert result.exit_code == 0
        assert result.output == "11 10 7 0 3 5 8 1 4 6 9 2\n"

    def test_naive(self, runner):
        result = runner.invoke(cli, ['csa', 'banana', '--algorithm', 'naive'])

        assert result.output.split() == ['5', '3', '1', '0', '4', '2']

    def test_empty_text(self, runner):
        result = runner.invoke(cli, ['csa', ''])

        assert result.exit_code == 1


class TestVersion:
    def test_version(self, runner):
        result = runner.invoke(cli, ['--version'])

        assert result.exit_code == 0
        assert "1.0.0" in result.output
