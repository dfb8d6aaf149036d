from enum import Enum


class PromptMode(str, Enum):
    UNIFIED = "UNIFIED"
    SEPARATE = "SEPARATE"
