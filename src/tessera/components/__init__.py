"""Layout containers and widgets."""

from tessera.components.box import Box
from tessera.components.button import Button
from tessera.components.center import Centerer, FractionalCenterer
from tessera.components.flex import Flex, FlexDirection
from tessera.components.form import Form
from tessera.components.grid import Grid
from tessera.components.progress import ProgressBar
from tessera.components.text_field import TextField

__all__ = [
    "Box",
    "Button",
    "Centerer",
    "Flex",
    "FlexDirection",
    "Form",
    "FractionalCenterer",
    "Grid",
    "ProgressBar",
    "TextField",
]
