import matplotlib.pyplot as plt
import numpy as np

class PerformanceDisplay:
    def __init__(self, logs,
                 fig_size=(10, 6), dpi=100, font_size=12,
                 dot_size=5, dot_alpha=0.3,
                 dot_color='blue',
                 trend_line_color='red', trend_line_linewidth=2,
                 moving_avg_window=10):
        self.logs = logs
        self.fig_size = fig_size
        self.dpi = dpi
        self.font_size = font_size
        self.dot_size = dot_size
        self.dot_alpha = dot_alpha
        self.dot_color = dot_color
        self.trend_line_color = trend_line_color
        self.trend_line_linewidth = trend_line_linewidth
        self.moving_avg_window = moving_avg_window

    def _moving_average(self, data):
        window = self.moving_avg_window
        if window < 1:
            raise ValueError("moving_avg_window must be at least 1")
        window = min(window, len(data))
        return np.convolve(data, np.ones(window) / window, mode='same')

    def _plot_graph(self, x, y_values, title, xlabel, ylabel, show_graph=False, save_path=None):
        if not y_values:
            print(f"No data available for {title}.")
            return False

        y = np.array(y_values, dtype=np.float64)
        trend = self._moving_average(y)

        plt.figure(figsize=self.fig_size, dpi=self.dpi)

        plt.scatter(x, y, s=self.dot_size, alpha=self.dot_alpha, color=self.dot_color, label="Data points")
        plt.plot(x, trend, color=self.trend_line_color, linewidth=self.trend_line_linewidth, label="Moving Average Trend")

        plt.title(title, fontsize=self.font_size + 2)
        plt.xlabel(xlabel, fontsize=self.font_size)
        plt.ylabel(ylabel, fontsize=self.font_size)
        plt.grid(True)
        plt.legend(fontsize=self.font_size)
        plt.tight_layout()

        if save_path:
            plt.savefig(save_path)
        if show_graph:
            plt.show()
        else:
            plt.close()
        return True

    def plot_code_lengths(self, show_graphs=False, save_path=None):
        """Code length of every symbol in the code table, by symbol value."""
        entries = sorted((log.symbol, len(log.code)) for log in self.logs if hasattr(log, 'code'))
        x = np.array([symbol for symbol, _ in entries])
        values = [length for _, length in entries]
        return self._plot_graph(x, values, "Huffman Code Lengths", "Symbol", "Code length (bits)", show_graphs, save_path)

    def plot_coding_log(self, show_graphs=False, save_path=None):
        """Ratio symbol_size / encoded_size for every CodingLog entry."""
        values = []
        for log in self.logs:
            if hasattr(log, 'symbol_size') and hasattr(log, 'encoded_size'):
                ratio = log.symbol_size / log.encoded_size if log.encoded_size != 0 else 0
                values.append(ratio)
        x = np.arange(1, len(values) + 1)
        return self._plot_graph(x, values, "Coding Log Ratio (symbol_size / encoded_size)", "Log Entry Order", "Ratio", show_graphs, save_path)
