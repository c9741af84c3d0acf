"""
Loading of drawings and golden decomposition fixtures from disk.
"""

from pathlib import Path
from typing import Dict, List, Union
import logging

logger = logging.getLogger(__name__)

FIGURE_SUFFIX = ".txt"
EXPECTED_SUFFIX = ".expected.txt"

PathLike = Union[str, Path]


def load_figure(path: PathLike, encoding: str = "utf-8") -> str:
    """Read a drawing from a text file."""
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"Figure not found: {path}")
    return path.read_text(encoding=encoding)


def load_expected(path: PathLike, encoding: str = "utf-8") -> List[str]:
    """
    Read a golden file listing the expected renderings.

    Renderings are separated by a single blank line; each one is returned with a
    line feed after every line, the way the extractor yields them.
    """
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"Expected rectangles not found: {path}")

    renderings = []
    block: List[str] = []
    for line in path.read_text(encoding=encoding).split("\n"):
        line = line.rstrip("\r")
        if line:
            block.append(line + "\n")
        elif block:
            renderings.append("".join(block))
            block = []
    if block:
        renderings.append("".join(block))
    return renderings


def format_renderings(renderings: List[str]) -> str:
    """Join renderings the way load_expected reads them back."""
    return "\n".join(renderings)


class FigureFixtureSet:
    """
    Directory of drawings paired with their expected decompositions.

    Layout:
        root/
            <name>.txt            drawing
            <name>.expected.txt   expected renderings
    """

    def __init__(self, root: PathLike, encoding: str = "utf-8"):
        self.root = Path(root)
        self.encoding = encoding

        if not self.root.is_dir():
            raise FileNotFoundError(f"Fixture directory not found: {self.root}")

        self.samples = []
        for figure_path in sorted(self.root.glob(f"*{FIGURE_SUFFIX}")):
            if figure_path.name.endswith(EXPECTED_SUFFIX):
                continue
            name = figure_path.name[:-len(FIGURE_SUFFIX)]
            expected_path = self.root / f"{name}{EXPECTED_SUFFIX}"
            if not expected_path.is_file():
                logger.warning(f"Skipping {figure_path.name}: no {expected_path.name}")
                continue
            self.samples.append((name, figure_path, expected_path))

        logger.info(f"Loaded {len(self.samples)} fixtures from {self.root}")

    def __len__(self) -> int:
        return len(self.samples)

    def __getitem__(self, idx: int) -> Dict[str, object]:
        name, figure_path, expected_path = self.samples[idx]
        return {
            'name': name,
            'figure': load_figure(figure_path, self.encoding),
            'expected': load_expected(expected_path, self.encoding),
        }

    @property
    def names(self) -> List[str]:
        return [name for name, _, _ in self.samples]
