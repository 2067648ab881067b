"""CSV Splitter - Split large CSV files into line-bounded parts."""

from csv_splitter.solver.split import main_split, split_file

__all__ = ["split_file", "main_split"]
