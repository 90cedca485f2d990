import yaml
import dacite
from typing import TypeVar, Type


T = TypeVar("T")


def load_from_yml(datatype: Type[T], filename) -> T:
    with open(filename) as f:
        data = yaml.safe_load(f)
    return dacite.from_dict(datatype, data)
