# tests/domain/test_posto.py
from datetime import date

from botijao.domain.posto.entities import Coordinates, GasStation


def _posto(**kw) -> GasStation:
    base = dict(user_id="u1", name="Posto Central", address="Av. Brasil, 1", city="Campinas", state="SP")
    base.update(kw)
    return GasStation(**base)


def test_posto_valido():
    assert _posto().validate() == []


def test_campos_obrigatorios():
    assert _posto(city="").validate() == ["Nome, endereco, cidade e estado sao obrigatorios"]


def test_opcionais_validados_quando_presentes():
    erros = _posto(cnpj="123", email="x", phone="1").validate()
    assert erros == [
        "CNPJ deve ter 14 digitos",
        "Formato de e-mail invalido",
        "Telefone deve ter 10 ou 11 digitos",
    ]


def test_licenca():
    p = _posto(license_expiry=date(2026, 3, 20))
    assert p.is_license_expiring_soon(date(2026, 3, 1))
    assert not p.is_license_expired(date(2026, 3, 1))
    assert p.is_license_expired(date(2026, 3, 21))
    assert not p.is_license_expiring_soon(date(2026, 1, 1))
    assert not _posto().is_license_expired(date(2026, 3, 1))


def test_coordenadas():
    assert not _posto().has_coordinates
    assert _posto(coordinates=Coordinates(-22.9, -47.06)).has_coordinates


def test_formatacoes():
    p = _posto(
        operating_hours={"monday": {"open": "08:00", "close": "18:00"}},
        services=("delivery", "outro"),
        payment_methods=("pix",),
    )
    assert p.operating_hours_formatted == "Segunda: 08:00 - 18:00"
    assert p.services_formatted == "Entrega, outro"
    assert p.payment_methods_formatted == "PIX"
    assert _posto().services_formatted == "Nenhum servico informado"
