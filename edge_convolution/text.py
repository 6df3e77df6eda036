from __future__ import annotations

from .kernels import KERNEL_NAMES
from .normalization import NORMALIZATION_NAMES, NormalizationMode


# Texto de ajuda do visualizador (atalhos de teclado)
def help_text() -> str:
    kernels = ", ".join(f"{kind.value + 1} = {name}" for kind, name in KERNEL_NAMES.items())
    return (
        "Teclas: 'o' mostra a imagem original, 'e' mostra as bordas.\n"
        f"Máscaras: {kernels}.\n"
        f"Normalização: l = {NORMALIZATION_NAMES[NormalizationMode.LOCAL]}, g = {NORMALIZATION_NAMES[NormalizationMode.GLOBAL]}, "
        f"n = {NORMALIZATION_NAMES[NormalizationMode.NONE]}.\n"
        "'s' alterna entre o modo de borda legado (saída bit a bit compatível) e o modo estrito "
        "(máscara centrada, sem leitura além da borda direita)."
    )
