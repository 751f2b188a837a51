# tests/application/test_gas_station_service.py
from datetime import date

import pytest

from botijao.application.services.gas_station_service import GasStationService
from botijao.domain.shared.errors import NotFoundError, ValidationError


@pytest.fixture()
def service(gas_station_repo, relogio) -> GasStationService:
    return GasStationService(gas_station_repo, relogio=relogio)


def _posto(**kw) -> dict:
    base = dict(
        name="Posto Central", address="Av. Brasil, 100", city="Campinas", state="sp",
        cnpj="11.222.333/0001-81", services=["delivery", "pix_only"], payment_methods=["pix", "cash"],
    )
    base.update(kw)
    return base


def test_create_normaliza(service, gas_station_repo):
    posto = service.create("u1", _posto(lat=-22.9, lng=-47.06)).data
    salvo = gas_station_repo.get_by_id(posto.id)
    assert salvo.cnpj == "11222333000181"
    assert salvo.state == "SP"
    assert salvo.services == ("delivery", "pix_only")
    assert posto.has_coordinates is True
    assert posto.services == "Entrega, pix_only"
    assert posto.payment_methods == "PIX, Dinheiro"


def test_create_obrigatorios(service):
    with pytest.raises(ValidationError) as exc:
        service.create("u1", _posto(name=" ", cnpj="123"))
    assert exc.value.erros == [
        "Nome, endereco, cidade e estado sao obrigatorios",
        "CNPJ deve ter 14 digitos",
    ]


def test_licenca_avaliada_na_data_do_relogio(service):
    vencendo = service.create("u1", _posto(license_expiry=date(2026, 3, 20))).data
    vencida = service.create("u1", _posto(license_expiry=date(2026, 2, 28))).data
    assert (vencendo.license_expired, vencendo.license_expiring_soon) == (False, True)
    assert (vencida.license_expired, vencida.license_expiring_soon) == (True, False)


def test_update_valida_mesclado(service):
    posto = service.create("u1", _posto()).data
    assert service.update(posto.id, {"name": "Posto Norte", "user_id": "u2"}).data.name == "Posto Norte"
    assert service.get(posto.id).user_id == "u1"
    with pytest.raises(ValidationError, match="Formato de e-mail invalido"):
        service.update(posto.id, {"email": "posto@"})


def test_toggle_active(service):
    posto = service.create("u1", _posto()).data
    resultado = service.toggle_active(posto.id)
    assert resultado.message == "Posto desativado com sucesso"
    assert service.list_active_by_user("u1") == []
    assert service.toggle_active(posto.id).message == "Posto ativado com sucesso"


def test_busca_por_localizacao(service):
    service.create("u1", _posto())
    service.create("u2", _posto(city="Sao Paulo"))
    assert [p.city for p in service.search_by_location("campi", "SP")] == ["Campinas"]
    with pytest.raises(ValidationError, match="Cidade e estado"):
        service.search_by_location("Campinas", "")


def test_dono_e_remocao(service):
    posto = service.create("u1", _posto()).data
    assert service.owned_by(posto.id, "u1")
    assert not service.owned_by(posto.id, "u2")
    service.delete(posto.id)
    with pytest.raises(NotFoundError, match="Posto nao encontrado"):
        service.get(posto.id)
