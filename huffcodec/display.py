from typing import Dict, List, Optional, Sequence, Tuple

import matplotlib.pyplot as plt
import numpy as np

from .models import FrequencyTable, Symbol
from .settings import BAR_WIDTH, FREQUENCY_TABLE_DISPLAY_LIMIT
from .statistics import CompressionResult
from .tree import HuffmanNode


def format_bytes(size: int) -> str:
    if size < 1024:
        return f"{size} B"
    if size < 1024 * 1024:
        return f"{size / 1024.0:.1f} KB"
    return f"{size / (1024.0 * 1024.0):.1f} MB"


def _truncate(text: str, max_length: int) -> str:
    if len(text) <= max_length:
        return text
    return text[:max_length - 3] + "..."


def _bar(percent: float, width: int) -> str:
    filled = int(percent / 100 * width)
    return "[" + "█" * filled + "░" * (width - filled) + "]"


class CompressionDisplay:
    def __init__(self,
                 fig_size=(10, 6), dpi=100, font_size=12,
                 bar_color='blue',
                 frequency_limit=FREQUENCY_TABLE_DISPLAY_LIMIT,
                 bar_width=BAR_WIDTH):
        self.fig_size = fig_size
        self.dpi = dpi
        self.font_size = font_size
        self.bar_color = bar_color
        self.frequency_limit = frequency_limit
        self.bar_width = bar_width

    def format_frequency_table(self, frequency_table: FrequencyTable) -> str:
        """
        Render the most frequent symbols with their share of the input.
        """
        total = frequency_table.total()
        lines = [
            "Character │  Frequency  │ Percentage",
            "──────────┼─────────────┼" + "─" * (self.bar_width + 12),
        ]
        for entry in frequency_table.most_common(self.frequency_limit):
            percent = entry.frequency / total * 100 if total else 0.0
            lines.append(f"{entry.symbol.display():<9} │ {entry.frequency:>11} │ "
                         f"{percent:6.2f}% {_bar(percent, self.bar_width)}")
        if frequency_table.get_size() > self.frequency_limit:
            lines.append(f"(Showing top {self.frequency_limit} of {frequency_table.get_size()} characters)")
        return "\n".join(lines)

    def format_code_table(self, code_table: Dict[Symbol, str]) -> str:
        """
        Render the codes ordered by length, then by symbol.
        """
        lines = [
            "Character │ Code            │ Length",
            "──────────┼─────────────────┼────────",
        ]
        for symbol, code in sorted(code_table.items(), key=lambda item: (len(item[1]), item[0])):
            lines.append(f"{symbol.display():<9} │ {code:<15} │ {len(code)}")
        lines.append(f"Total unique characters: {len(code_table)}")
        return "\n".join(lines)

    def format_tree(self, root: Optional[HuffmanNode]) -> str:
        if root is None:
            return "Huffman tree not built."
        lines = []
        stack: List[Tuple[HuffmanNode, str, bool]] = [(root, "", True)]
        while stack:
            node, indent, last = stack.pop()
            connector = "└─" if last else "├─"
            if node.is_leaf:
                lines.append(f"{indent}{connector}'{node.symbol.display()}' ({node.frequency})")
                continue
            lines.append(f"{indent}{connector}[{node.frequency}]")
            child_indent = indent + ("  " if last else "│ ")
            if node.right is not None:
                stack.append((node.right, child_indent, True))
            if node.left is not None:
                stack.append((node.left, child_indent, node.right is None))
        return "\n".join(lines)

    def format_comparison(self, results: Sequence[Tuple[str, CompressionResult]]) -> str:
        lines = [
            f"{'File':<23} │ {'Original':>10} │ {'Compressed':>11} │ {'Ratio':>8} │ {'Savings':>8}",
            "─" * 23 + "─┼─" + "─" * 10 + "─┼─" + "─" * 11 + "─┼─" + "─" * 8 + "─┼─" + "─" * 8,
        ]
        for name, result in results:
            lines.append(f"{_truncate(name, 23):<23} │ {format_bytes(result.original_size):>10} │ "
                         f"{format_bytes(result.compressed_size):>11} │ {result.compression_ratio:>7.2f}x │ "
                         f"{result.space_savings:>7.2f}%")
        return "\n".join(lines)

    def _plot_bars(self, labels, values, title, xlabel, ylabel, show_graph=False, save_path=None):
        if not values:
            print(f"No data available for {title}.")
            return

        x = np.arange(len(values))

        plt.figure(figsize=self.fig_size, dpi=self.dpi)
        plt.bar(x, values, color=self.bar_color)
        plt.xticks(x, labels, rotation=90, fontsize=self.font_size - 4)

        plt.title(title, fontsize=self.font_size + 2)
        plt.xlabel(xlabel, fontsize=self.font_size)
        plt.ylabel(ylabel, fontsize=self.font_size)
        plt.grid(True, axis='y')
        plt.tight_layout()

        if save_path:
            plt.savefig(save_path)
        if show_graph:
            plt.show()
        plt.close()

    def plot_frequencies(self, frequency_table: FrequencyTable, show_graph=False, save_path=None):
        entries = frequency_table.most_common()
        labels = [entry.symbol.display() for entry in entries]
        values = [entry.frequency for entry in entries]
        self._plot_bars(labels, values, "Symbol Frequencies", "Symbol", "Frequency", show_graph, save_path)

    def plot_code_lengths(self, code_table: Dict[Symbol, str], show_graph=False, save_path=None):
        ordered = sorted(code_table.items(), key=lambda item: (len(item[1]), item[0]))
        labels = [symbol.display() for symbol, _ in ordered]
        values = [len(code) for _, code in ordered]
        self._plot_bars(labels, values, "Huffman Code Lengths", "Symbol", "Code length (bits)", show_graph, save_path)
