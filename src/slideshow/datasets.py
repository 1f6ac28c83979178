"""Fixed set of input datasets."""

from enum import Enum


class Dataset(Enum):
    """Input base names processed by a default run."""

    EXAMPLE_A = "a_example"
    EXAMPLE_B = "b_lovely_landscapes"
    EXAMPLE_C = "c_memorable_moments"
    EXAMPLE_D = "d_pet_pictures"
    EXAMPLE_E = "e_shiny_selfies"


def default_dataset_names() -> list[str]:
    """Return the base names of all known datasets."""
    return [entry.value for entry in Dataset]


def input_filename(name: str) -> str:
    """Return the input file name for a dataset."""
    return f"{name}.txt"


def result_filename(name: str) -> str:
    """Return the result file name for a dataset."""
    return f"{name}_result.txt"
