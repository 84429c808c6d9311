from django.contrib import admin

from .models import (
    Anexo,
    Caracteristica,
    CorretorPrincipal,
    Empreendimento,
    Endereco,
    Imovel,
    Organizacao,
    Pacote,
    Planta,
    PrecoAluguel,
    PrecoVenda,
    Torre,
)


class AnexoInline(admin.TabularInline):
    model = Anexo
    fk_name = "imovel"
    extra = 0
    fields = ("nome", "url", "tipo", "image", "is_external_url", "can_publish")


@admin.register(Imovel)
class ImovelAdmin(admin.ModelAdmin):
    list_display = (
        "codigo", "titulo", "tipo", "objetivo", "status",
        "published", "id_integracao", "updated_at",
    )
    search_fields = ("codigo", "titulo", "id_integracao")
    list_filter = ("tipo", "objetivo", "finalidade", "status", "published")
    raw_id_fields = (
        "endereco", "empreendimento", "planta", "corretor_principal",
        "pacote", "preco_venda", "preco_aluguel",
    )
    inlines = [AnexoInline]


@admin.register(Empreendimento)
class EmpreendimentoAdmin(admin.ModelAdmin):
    list_display = ("titulo", "tipo", "status", "id_integracao")
    search_fields = ("titulo", "id_integracao")
    list_filter = ("tipo", "status")


@admin.register(CorretorPrincipal)
class CorretorPrincipalAdmin(admin.ModelAdmin):
    list_display = ("nome", "email", "whatsapp", "organizacao", "id_integracao")
    search_fields = ("nome", "email")


@admin.register(Organizacao)
class OrganizacaoAdmin(admin.ModelAdmin):
    list_display = ("nome", "perfil")
    search_fields = ("nome",)


@admin.register(PrecoVenda)
class PrecoVendaAdmin(admin.ModelAdmin):
    list_display = ("preco", "ativo", "aceita_financiamento_bancario", "aceita_fgts", "id_integracao")
    list_filter = ("ativo",)


@admin.register(PrecoAluguel)
class PrecoAluguelAdmin(admin.ModelAdmin):
    list_display = ("preco", "ativo", "aceita_fiador", "id_integracao")
    list_filter = ("ativo",)


@admin.register(Endereco)
class EnderecoAdmin(admin.ModelAdmin):
    list_display = ("rua", "numero", "bairro", "cidade", "estado", "cep")
    search_fields = ("rua", "bairro", "cidade", "cep")


@admin.register(Anexo)
class AnexoAdmin(admin.ModelAdmin):
    list_display = ("nome", "tipo", "imovel", "empreendimento", "planta", "is_external_url")
    list_filter = ("tipo", "image", "video", "is_external_url")


admin.site.register(Caracteristica)
admin.site.register(Pacote)
admin.site.register(Planta)
admin.site.register(Torre)
