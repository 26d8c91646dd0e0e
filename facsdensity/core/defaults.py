# defaults.py

DEFAULT_PLOT_CONFIG = {
    "channel": "FL1-A",
    "x_axis_label": "DNA content",
    "y_axis_label": "Time in meiosis\n(hrs)\n",
    "plot_color": "black",
    "plot_transparency": 0.8,
    "file_format": "jpeg",
    "gate": None,
    "user_input": True,
    "on_duplicate": "overwrite",
}
