# tests/application/test_deliveryman_service.py
import pytest

from botijao.application.services.deliveryman_service import DeliverymanService
from botijao.domain.shared.errors import ConflictError, NotFoundError, ValidationError


@pytest.fixture()
def service(deliveryman_repo, relogio) -> DeliverymanService:
    return DeliverymanService(deliveryman_repo, relogio=relogio)


def _dados(**kw) -> dict:
    base = dict(
        name="Carlos", phone="(11) 98888-7777", email="Carlos@Gas.com",
        cpf="123.456.789-09", gas_station_id="1", permissions=["view_orders"],
    )
    base.update(kw)
    return base


def test_create_normaliza_e_mascara(service, deliveryman_repo):
    resultado = service.create(_dados())
    assert resultado.success
    assert resultado.data.cpf == "***.456.789-**"
    salvo = deliveryman_repo.find_by_id(resultado.data.id)
    assert salvo.cpf == "12345678909"
    assert salvo.email == "carlos@gas.com"


def test_create_tres_erros(service):
    with pytest.raises(ValidationError) as exc:
        service.create(_dados(name="C", email="carlos", cpf="1"))
    assert len(exc.value.erros) == 3


def test_create_email_duplicado(service):
    service.create(_dados())
    with pytest.raises(ConflictError, match="E-mail"):
        service.create(_dados(cpf="987.654.321-00"))


def test_create_cpf_duplicado(service):
    service.create(_dados())
    with pytest.raises(ConflictError, match="CPF"):
        service.create(_dados(email="outro@gas.com", cpf="12345678909"))


def test_update_ignora_o_proprio_registro_na_unicidade(service):
    criado = service.create(_dados()).data
    resultado = service.update(criado.id, {"name": "Carlos Souza", "email": "carlos@gas.com"})
    assert resultado.data.name == "Carlos Souza"


def test_update_conflito_com_outro(service):
    service.create(_dados())
    outro = service.create(_dados(email="b@gas.com", cpf="98765432100")).data
    with pytest.raises(ConflictError):
        service.update(outro.id, {"email": "carlos@gas.com"})


def test_update_inexistente(service):
    with pytest.raises(NotFoundError, match="Entregador nao encontrado"):
        service.update("99", {"name": "X"})


def test_ativar_desativar(service, deliveryman_repo):
    criado = service.create(_dados()).data
    assert service.deactivate(criado.id).data.active is False
    assert deliveryman_repo.find_by_id(criado.id).active is False
    assert service.activate(criado.id).data.active is True


def test_permissoes(service):
    criado = service.create(_dados()).data
    resultado = service.update_permissions(criado.id, ["manage_invoices", "access_reports"])
    assert [p.id for p in resultado.data.permissions] == ["access_reports", "manage_invoices"]
    assert len(DeliverymanService.available_permissions()) == 5


def test_delete(service):
    criado = service.create(_dados()).data
    assert service.delete(criado.id).success
    with pytest.raises(NotFoundError):
        service.delete(criado.id)


def test_listagens(service):
    service.create(_dados())
    service.create(_dados(email="b@gas.com", cpf="98765432100", gas_station_id="2"))
    assert len(service.list_all()) == 2
    assert len(service.list_by_gas_station("2")) == 1
