import unittest

from psionwrd.blocks import FormatBlock, format_blocks
from wrd_builders import build_blocks


class FormatBlockTest(unittest.TestCase):
    def test_partitions_text(self) -> None:
        data = build_blocks([(4, b"HA", b"NN"), (3, b"BT", b"BB"), (5, b"BT", b"NN")])
        blocks = format_blocks(data, 12)
        self.assertEqual(
            [
                FormatBlock(0, 3, "HA", "NN"),
                FormatBlock(4, 6, "BT", "BB"),
                FormatBlock(7, 11, "BT", "NN"),
            ],
            blocks,
        )
        covered = [i for block in blocks for i in range(block.start_index, block.end_index + 1)]
        self.assertEqual(list(range(12)), covered)

    def test_end_clamped_to_text(self) -> None:
        blocks = format_blocks(build_blocks([(4, b"BT", b"NN"), (10, b"BT", b"II")]), 6)
        self.assertEqual(5, blocks[-1].end_index)

    def test_stops_at_text_length(self) -> None:
        data = build_blocks([(3, b"BT", b"NN"), (3, b"BT", b"NN"), (3, b"HA", b"NN")])
        self.assertEqual(2, len(format_blocks(data, 6)))

    def test_trailing_padding_ignored(self) -> None:
        data = build_blocks([(2, b"BL", b"NN")]) + b"\x00\x00\x00"
        self.assertEqual([FormatBlock(0, 1, "BL", "NN")], format_blocks(data, 10))

    def test_no_text(self) -> None:
        self.assertEqual([], format_blocks(build_blocks([(1, b"BT", b"NN")]), 0))

    def test_undecodable_codes_use_defaults(self) -> None:
        blocks = format_blocks(build_blocks([(1, b"\x81\x81", b"\x8d\x8d")]), 1)
        self.assertEqual("BT", blocks[0].style_code)
        self.assertEqual("NN", blocks[0].emphasis_code)


if __name__ == "__main__":
    unittest.main()
