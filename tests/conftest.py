import pytest


@pytest.fixture()
def sample_csv() -> str:
    """A sheet export with the three labelled rows below a header."""
    return "\n".join(
        [
            "header,,,",
            "Vidas Totais vendidas,,16,,,,,,",
            "Valor Recebido,,R$ 414,96,,,,,,",
            "Média Mês ( 8 meses ) ,,R$ 51,87,,,,,,",
        ]
    )


@pytest.fixture()
def quoted_csv() -> str:
    """A sheet export as Google Sheets writes it, with quoted currency cells."""
    return (
        'Resumo,,,\r\n'
        '"Vidas Totais vendidas",,"248",,\r\n'
        '"Valor Recebido",,"R$ 12.345,67",,\r\n'
        '\t"Média Mês ( 8 meses )",,"R$ 1.543,21",,\r\n'
    )
