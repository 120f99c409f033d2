from adapter.external.academia_galega import AcademiaGalegaAdapter
from port.dictionary import DictionaryPort


def get_dictionary_port() -> DictionaryPort:
    return AcademiaGalegaAdapter()
