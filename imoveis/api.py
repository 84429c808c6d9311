from django.shortcuts import get_object_or_404
from ninja import Query, Router
from ninja.pagination import LimitOffsetPagination, paginate

from imoveis.models import Imovel
from imoveis.schemas import (
    AnexoSchema,
    CaracteristicaSchema,
    ImovelFilterSchema,
    ImovelListSchema,
    ImovelSchema,
)

router = Router(tags=["Imoveis"])


@router.get("/", response=list[ImovelListSchema])
@paginate(LimitOffsetPagination)
def list_imoveis(request, filters: Query[ImovelFilterSchema]):
    qs = Imovel.objects.select_related(
        "endereco", "preco_venda", "preco_aluguel"
    ).order_by("-created_at")
    return filters.filter(qs)


@router.get("/{imovel_id}", response=ImovelSchema)
def get_imovel(request, imovel_id: int):
    return get_object_or_404(
        Imovel.objects.select_related(
            "endereco",
            "empreendimento",
            "corretor_principal__organizacao",
            "preco_venda",
            "preco_aluguel",
        ).prefetch_related("anexos"),
        id=imovel_id,
    )


@router.get("/{imovel_id}/anexos", response=list[AnexoSchema])
def list_imovel_anexos(request, imovel_id: int):
    imovel = get_object_or_404(Imovel, id=imovel_id)
    return imovel.anexos.all()


@router.get("/{imovel_id}/caracteristicas", response=list[CaracteristicaSchema])
def list_imovel_caracteristicas(request, imovel_id: int):
    imovel = get_object_or_404(Imovel, id=imovel_id)
    return imovel.caracteristicas.all()
