"""corpusops - lexical statistics, keyword filtering and slicing of text corpora."""

from corpusops.engine import analyse_directory, analyse_file, analyse_wikipedia

__version__ = "0.1.0"

__all__ = ["analyse_file", "analyse_directory", "analyse_wikipedia"]
