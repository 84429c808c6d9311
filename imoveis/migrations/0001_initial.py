import django.db.models.deletion
from django.db import migrations, models


def _timestamps():
    return [
        ("created_at", models.DateTimeField(auto_now_add=True)),
        ("updated_at", models.DateTimeField(auto_now=True)),
    ]


def _id():
    return ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID"))


def _id_integracao():
    return (
        "id_integracao",
        models.CharField(blank=True, db_index=True, max_length=50, null=True, unique=True),
    )


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Endereco",
            fields=[
                _id(),
                ("rua", models.CharField(max_length=255)),
                ("numero", models.IntegerField(blank=True, null=True)),
                ("bairro", models.CharField(blank=True, max_length=255)),
                ("cidade", models.CharField(blank=True, max_length=255)),
                ("estado", models.CharField(blank=True, max_length=2)),
                ("cep", models.CharField(blank=True, max_length=20)),
                ("latitude", models.DecimalField(blank=True, decimal_places=7, max_digits=10, null=True)),
                ("longitude", models.DecimalField(blank=True, decimal_places=7, max_digits=10, null=True)),
            ],
        ),
        migrations.CreateModel(
            name="Organizacao",
            fields=[
                _id(),
                ("nome", models.CharField(max_length=255, unique=True)),
                ("perfil", models.CharField(blank=True, max_length=100)),
                *_timestamps(),
            ],
            options={"verbose_name_plural": "organizacoes"},
        ),
        migrations.CreateModel(
            name="Caracteristica",
            fields=[
                _id(),
                ("nome", models.CharField(max_length=255)),
                ("categoria_id", models.IntegerField(blank=True, null=True)),
                ("categoria_nome", models.CharField(blank=True, max_length=255)),
                *_timestamps(),
            ],
        ),
        migrations.CreateModel(
            name="Empreendimento",
            fields=[
                _id(),
                _id_integracao(),
                ("titulo", models.CharField(max_length=255)),
                ("descricao", models.TextField(blank=True)),
                ("data_entrega", models.DateField(blank=True, null=True)),
                ("etapa_lancamento", models.CharField(blank=True, max_length=100)),
                ("finalidade", models.CharField(blank=True, max_length=50)),
                ("tipo", models.CharField(blank=True, max_length=50)),
                ("status", models.CharField(blank=True, max_length=50)),
                ("localizacao", models.CharField(blank=True, max_length=255)),
                (
                    "endereco",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="empreendimentos",
                        to="imoveis.endereco",
                    ),
                ),
                (
                    "caracteristicas",
                    models.ManyToManyField(blank=True, related_name="empreendimentos", to="imoveis.caracteristica"),
                ),
                *_timestamps(),
            ],
        ),
        migrations.CreateModel(
            name="Torre",
            fields=[
                _id(),
                ("nome", models.CharField(max_length=255)),
                ("total_colunas", models.IntegerField(default=0)),
                ("total_elevadores", models.IntegerField(default=0)),
                ("total_pavimentos", models.IntegerField(default=0)),
                ("total_unidades", models.IntegerField(default=0)),
                (
                    "empreendimento",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="torres",
                        to="imoveis.empreendimento",
                    ),
                ),
                *_timestamps(),
            ],
        ),
        migrations.CreateModel(
            name="Planta",
            fields=[
                _id(),
                ("nome", models.CharField(max_length=255)),
                ("metragem", models.DecimalField(blank=True, decimal_places=2, max_digits=10, null=True)),
                (
                    "empreendimento",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="plantas",
                        to="imoveis.empreendimento",
                    ),
                ),
                *_timestamps(),
            ],
        ),
        migrations.CreateModel(
            name="Pacote",
            fields=[
                _id(),
                _id_integracao(),
                ("titulo", models.CharField(max_length=255)),
                ("descricao", models.TextField(blank=True)),
                ("exclusivo", models.BooleanField(default=False)),
                ("em_destaque", models.BooleanField(default=False)),
                *_timestamps(),
            ],
        ),
        migrations.CreateModel(
            name="PrecoVenda",
            fields=[
                _id(),
                _id_integracao(),
                ("preco", models.DecimalField(decimal_places=2, default=0, max_digits=14)),
                ("aceita_financiamento_bancario", models.BooleanField(default=False)),
                ("aceita_financiamento_direto", models.BooleanField(default=False)),
                ("aceita_permuta", models.BooleanField(default=False)),
                ("aceita_carta_de_credito", models.BooleanField(default=False)),
                ("aceita_fgts", models.BooleanField(default=False)),
                ("ativo", models.BooleanField(default=True)),
                ("pacote_titulo", models.CharField(blank=True, max_length=255)),
                ("pacote_descricao", models.TextField(blank=True)),
                ("pacote_exclusivo", models.BooleanField(default=False)),
                ("pacote_em_destaque", models.BooleanField(default=False)),
                *_timestamps(),
            ],
            options={"verbose_name": "preco de venda", "verbose_name_plural": "precos de venda"},
        ),
        migrations.CreateModel(
            name="PrecoAluguel",
            fields=[
                _id(),
                _id_integracao(),
                ("preco", models.DecimalField(decimal_places=2, default=0, max_digits=14)),
                ("aceita_fiador", models.BooleanField(default=False)),
                ("ativo", models.BooleanField(default=True)),
                *_timestamps(),
            ],
            options={"verbose_name": "preco de aluguel", "verbose_name_plural": "precos de aluguel"},
        ),
        # foto is added after Anexo exists
        migrations.CreateModel(
            name="CorretorPrincipal",
            fields=[
                _id(),
                _id_integracao(),
                ("nome", models.CharField(max_length=255)),
                ("email", models.EmailField(blank=True, max_length=254)),
                ("whatsapp", models.CharField(blank=True, max_length=50)),
                ("idiomas", models.JSONField(blank=True, default=list)),
                ("bairros_atuacao", models.JSONField(blank=True, default=list)),
                (
                    "organizacao",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="corretores",
                        to="imoveis.organizacao",
                    ),
                ),
                *_timestamps(),
            ],
            options={"verbose_name": "corretor principal", "verbose_name_plural": "corretores principais"},
        ),
        migrations.CreateModel(
            name="Imovel",
            fields=[
                _id(),
                _id_integracao(),
                ("codigo", models.CharField(max_length=50, unique=True)),
                ("titulo", models.CharField(max_length=255)),
                (
                    "tipo",
                    models.CharField(
                        blank=True,
                        choices=[
                            ("APARTAMENTO", "Apartamento"),
                            ("CASA", "Casa"),
                            ("COMERCIAL", "Comercial"),
                            ("SALA_COMERCIAL", "Sala comercial"),
                            ("TERRENO", "Terreno"),
                            ("GALPAO", "Galpao"),
                        ],
                        max_length=30,
                    ),
                ),
                (
                    "objetivo",
                    models.CharField(
                        blank=True, choices=[("VENDER", "Vender"), ("ALUGAR", "Alugar")], max_length=10
                    ),
                ),
                (
                    "finalidade",
                    models.CharField(
                        blank=True,
                        choices=[("RESIDENCIAL", "Residencial"), ("COMERCIAL", "Comercial"), ("MISTO", "Misto")],
                        max_length=20,
                    ),
                ),
                ("descricao", models.TextField(blank=True)),
                ("metragem", models.DecimalField(decimal_places=2, default=0, max_digits=10)),
                ("num_quartos", models.IntegerField(default=0)),
                ("num_suites", models.IntegerField(default=0)),
                ("num_banheiros", models.IntegerField(default=0)),
                ("num_vagas", models.IntegerField(default=0)),
                ("num_andar", models.IntegerField(default=0)),
                ("unidade", models.CharField(blank=True, max_length=20)),
                ("condominio", models.DecimalField(decimal_places=2, default=0, max_digits=12)),
                ("iptu", models.DecimalField(decimal_places=2, default=0, max_digits=12)),
                ("inscricao_iptu", models.CharField(blank=True, max_length=50)),
                (
                    "status",
                    models.CharField(
                        choices=[
                            ("PUBLICADO", "Publicado"),
                            ("EM_EDICAO", "Em edicao"),
                            ("ARQUIVADO", "Arquivado"),
                        ],
                        default="EM_EDICAO",
                        max_length=20,
                    ),
                ),
                ("published", models.BooleanField(default=False)),
                ("closed", models.BooleanField(default=False)),
                ("visualizacoes", models.IntegerField(default=0)),
                (
                    "endereco",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="imoveis",
                        to="imoveis.endereco",
                    ),
                ),
                (
                    "empreendimento",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="imoveis",
                        to="imoveis.empreendimento",
                    ),
                ),
                (
                    "planta",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="imoveis",
                        to="imoveis.planta",
                    ),
                ),
                (
                    "corretor_principal",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="imoveis",
                        to="imoveis.corretorprincipal",
                    ),
                ),
                (
                    "pacote",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="imoveis",
                        to="imoveis.pacote",
                    ),
                ),
                (
                    "preco_venda",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="imoveis",
                        to="imoveis.precovenda",
                    ),
                ),
                (
                    "preco_aluguel",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="imoveis",
                        to="imoveis.precoaluguel",
                    ),
                ),
                (
                    "caracteristicas",
                    models.ManyToManyField(blank=True, related_name="imoveis", to="imoveis.caracteristica"),
                ),
                *_timestamps(),
            ],
            options={"verbose_name_plural": "imoveis"},
        ),
        migrations.CreateModel(
            name="Anexo",
            fields=[
                _id(),
                ("nome", models.CharField(max_length=255)),
                ("path", models.CharField(blank=True, max_length=500)),
                ("tamanho", models.BigIntegerField(default=0)),
                ("tipo", models.CharField(blank=True, max_length=50)),
                ("url", models.URLField(blank=True, max_length=1000)),
                ("can_publish", models.BooleanField(default=False)),
                ("image", models.BooleanField(default=False)),
                ("video", models.BooleanField(default=False)),
                ("is_external_url", models.BooleanField(default=False)),
                (
                    "imovel",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="anexos",
                        to="imoveis.imovel",
                    ),
                ),
                (
                    "empreendimento",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="anexos",
                        to="imoveis.empreendimento",
                    ),
                ),
                (
                    "planta",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="anexos",
                        to="imoveis.planta",
                    ),
                ),
                *_timestamps(),
            ],
            options={
                "ordering": ["id"],
                "constraints": [
                    models.CheckConstraint(
                        condition=(
                            models.Q(imovel__isnull=True, empreendimento__isnull=True)
                            | models.Q(imovel__isnull=True, planta__isnull=True)
                            | models.Q(empreendimento__isnull=True, planta__isnull=True)
                        ),
                        name="anexo_single_owner",
                    ),
                ],
            },
        ),
        migrations.AddField(
            model_name="corretorprincipal",
            name="foto",
            field=models.ForeignKey(
                blank=True,
                null=True,
                on_delete=django.db.models.deletion.SET_NULL,
                related_name="+",
                to="imoveis.anexo",
            ),
        ),
    ]
