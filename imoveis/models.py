from django.db import models


class Endereco(models.Model):
    """Street address. Imported addresses are never correlated; each import inserts a new row."""

    rua = models.CharField(max_length=255)
    numero = models.IntegerField(null=True, blank=True)
    bairro = models.CharField(max_length=255, blank=True)
    cidade = models.CharField(max_length=255, blank=True)
    estado = models.CharField(max_length=2, blank=True)
    cep = models.CharField(max_length=20, blank=True)
    latitude = models.DecimalField(
        max_digits=10, decimal_places=7, null=True, blank=True
    )
    longitude = models.DecimalField(
        max_digits=10, decimal_places=7, null=True, blank=True
    )

    def __str__(self):
        parts = [self.rua, str(self.numero) if self.numero else "", self.cidade]
        return ", ".join(p for p in parts if p)


class Organizacao(models.Model):
    """
    Real-estate agency a broker belongs to. The provider exposes no stable
    id for organizations, so the name is the correlation key.
    """

    nome = models.CharField(max_length=255, unique=True)
    perfil = models.CharField(max_length=100, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name_plural = "organizacoes"

    def __str__(self):
        return self.nome


class Caracteristica(models.Model):
    """Reference data (e.g. "Piscina", "Churrasqueira"). Not written by the import."""

    nome = models.CharField(max_length=255)
    categoria_id = models.IntegerField(null=True, blank=True)
    categoria_nome = models.CharField(max_length=255, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self):
        return self.nome


class Empreendimento(models.Model):
    """Development (building or project) grouping several imoveis."""

    id_integracao = models.CharField(
        max_length=50, unique=True, null=True, blank=True, db_index=True
    )
    titulo = models.CharField(max_length=255)
    descricao = models.TextField(blank=True)
    data_entrega = models.DateField(null=True, blank=True)
    etapa_lancamento = models.CharField(max_length=100, blank=True)
    finalidade = models.CharField(max_length=50, blank=True)
    tipo = models.CharField(max_length=50, blank=True)
    status = models.CharField(max_length=50, blank=True)
    localizacao = models.CharField(max_length=255, blank=True)

    endereco = models.ForeignKey(
        Endereco,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="empreendimentos",
    )
    caracteristicas = models.ManyToManyField(
        Caracteristica, related_name="empreendimentos", blank=True
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self):
        return self.titulo or f"Empreendimento #{self.pk}"


class Torre(models.Model):
    nome = models.CharField(max_length=255)
    total_colunas = models.IntegerField(default=0)
    total_elevadores = models.IntegerField(default=0)
    total_pavimentos = models.IntegerField(default=0)
    total_unidades = models.IntegerField(default=0)
    empreendimento = models.ForeignKey(
        Empreendimento, on_delete=models.CASCADE, related_name="torres"
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self):
        return self.nome


class Planta(models.Model):
    """Floor plan of a development."""

    nome = models.CharField(max_length=255)
    metragem = models.DecimalField(
        max_digits=10, decimal_places=2, null=True, blank=True
    )
    empreendimento = models.ForeignKey(
        Empreendimento,
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        related_name="plantas",
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self):
        return self.nome


class Pacote(models.Model):
    """Advertising package."""

    id_integracao = models.CharField(
        max_length=50, unique=True, null=True, blank=True, db_index=True
    )
    titulo = models.CharField(max_length=255)
    descricao = models.TextField(blank=True)
    exclusivo = models.BooleanField(default=False)
    em_destaque = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self):
        return self.titulo


class PrecoVenda(models.Model):
    id_integracao = models.CharField(
        max_length=50, unique=True, null=True, blank=True, db_index=True
    )
    preco = models.DecimalField(max_digits=14, decimal_places=2, default=0)
    aceita_financiamento_bancario = models.BooleanField(default=False)
    aceita_financiamento_direto = models.BooleanField(default=False)
    aceita_permuta = models.BooleanField(default=False)
    aceita_carta_de_credito = models.BooleanField(default=False)
    aceita_fgts = models.BooleanField(default=False)
    ativo = models.BooleanField(default=True)

    # Package the price was advertised under, denormalized from the provider
    pacote_titulo = models.CharField(max_length=255, blank=True)
    pacote_descricao = models.TextField(blank=True)
    pacote_exclusivo = models.BooleanField(default=False)
    pacote_em_destaque = models.BooleanField(default=False)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = "preco de venda"
        verbose_name_plural = "precos de venda"

    def __str__(self):
        return f"Venda R$ {self.preco}"


class PrecoAluguel(models.Model):
    id_integracao = models.CharField(
        max_length=50, unique=True, null=True, blank=True, db_index=True
    )
    preco = models.DecimalField(max_digits=14, decimal_places=2, default=0)
    aceita_fiador = models.BooleanField(default=False)
    ativo = models.BooleanField(default=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = "preco de aluguel"
        verbose_name_plural = "precos de aluguel"

    def __str__(self):
        return f"Aluguel R$ {self.preco}"


class CorretorPrincipal(models.Model):
    """Listing broker."""

    id_integracao = models.CharField(
        max_length=50, unique=True, null=True, blank=True, db_index=True
    )
    nome = models.CharField(max_length=255)
    email = models.EmailField(blank=True)
    whatsapp = models.CharField(max_length=50, blank=True)
    idiomas = models.JSONField(default=list, blank=True)
    bairros_atuacao = models.JSONField(default=list, blank=True)

    foto = models.ForeignKey(
        "Anexo",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="+",
    )
    organizacao = models.ForeignKey(
        Organizacao,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="corretores",
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = "corretor principal"
        verbose_name_plural = "corretores principais"

    def __str__(self):
        return self.nome or self.email


class Imovel(models.Model):
    """
    Central listing record. ``id_integracao`` holds the provider id (as a
    string) for imported listings and is the key re-imports update by.
    """

    id_integracao = models.CharField(
        max_length=50, unique=True, null=True, blank=True, db_index=True
    )
    codigo = models.CharField(max_length=50, unique=True)
    titulo = models.CharField(max_length=255)

    TIPO_CHOICES = [
        ("APARTAMENTO", "Apartamento"),
        ("CASA", "Casa"),
        ("COMERCIAL", "Comercial"),
        ("SALA_COMERCIAL", "Sala comercial"),
        ("TERRENO", "Terreno"),
        ("GALPAO", "Galpao"),
    ]
    tipo = models.CharField(max_length=30, choices=TIPO_CHOICES, blank=True)

    OBJETIVO_CHOICES = [
        ("VENDER", "Vender"),
        ("ALUGAR", "Alugar"),
    ]
    objetivo = models.CharField(max_length=10, choices=OBJETIVO_CHOICES, blank=True)

    FINALIDADE_CHOICES = [
        ("RESIDENCIAL", "Residencial"),
        ("COMERCIAL", "Comercial"),
        ("MISTO", "Misto"),
    ]
    finalidade = models.CharField(
        max_length=20, choices=FINALIDADE_CHOICES, blank=True
    )
    descricao = models.TextField(blank=True)

    # Specs
    metragem = models.DecimalField(max_digits=10, decimal_places=2, default=0)
    num_quartos = models.IntegerField(default=0)
    num_suites = models.IntegerField(default=0)
    num_banheiros = models.IntegerField(default=0)
    num_vagas = models.IntegerField(default=0)
    num_andar = models.IntegerField(default=0)
    unidade = models.CharField(max_length=20, blank=True)

    # Financial
    condominio = models.DecimalField(max_digits=12, decimal_places=2, default=0)
    iptu = models.DecimalField(max_digits=12, decimal_places=2, default=0)
    inscricao_iptu = models.CharField(max_length=50, blank=True)

    STATUS_PUBLICADO = "PUBLICADO"
    STATUS_EM_EDICAO = "EM_EDICAO"
    STATUS_ARQUIVADO = "ARQUIVADO"
    STATUS_CHOICES = [
        (STATUS_PUBLICADO, "Publicado"),
        (STATUS_EM_EDICAO, "Em edicao"),
        (STATUS_ARQUIVADO, "Arquivado"),
    ]
    status = models.CharField(
        max_length=20, choices=STATUS_CHOICES, default=STATUS_EM_EDICAO
    )
    published = models.BooleanField(default=False)
    closed = models.BooleanField(default=False)
    visualizacoes = models.IntegerField(default=0)

    endereco = models.ForeignKey(
        Endereco,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="imoveis",
    )
    empreendimento = models.ForeignKey(
        Empreendimento,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="imoveis",
    )
    planta = models.ForeignKey(
        Planta,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="imoveis",
    )
    corretor_principal = models.ForeignKey(
        CorretorPrincipal,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="imoveis",
    )
    pacote = models.ForeignKey(
        Pacote,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="imoveis",
    )
    preco_venda = models.ForeignKey(
        PrecoVenda,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="imoveis",
    )
    preco_aluguel = models.ForeignKey(
        PrecoAluguel,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="imoveis",
    )
    caracteristicas = models.ManyToManyField(
        Caracteristica, related_name="imoveis", blank=True
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name_plural = "imoveis"

    def __str__(self):
        return f"{self.codigo} - {self.titulo}"


class Anexo(models.Model):
    """
    File or external URL attached to exactly one owner: an Imovel, an
    Empreendimento or a Planta. Broker photos are unowned.
    """

    nome = models.CharField(max_length=255)
    path = models.CharField(max_length=500, blank=True)
    tamanho = models.BigIntegerField(default=0)
    tipo = models.CharField(max_length=50, blank=True)
    url = models.URLField(max_length=1000, blank=True)
    can_publish = models.BooleanField(default=False)
    image = models.BooleanField(default=False)
    video = models.BooleanField(default=False)
    is_external_url = models.BooleanField(default=False)

    imovel = models.ForeignKey(
        Imovel,
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        related_name="anexos",
    )
    empreendimento = models.ForeignKey(
        Empreendimento,
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        related_name="anexos",
    )
    planta = models.ForeignKey(
        Planta,
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        related_name="anexos",
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["id"]
        constraints = [
            # At most one owner may be set
            models.CheckConstraint(
                condition=(
                    models.Q(imovel__isnull=True, empreendimento__isnull=True)
                    | models.Q(imovel__isnull=True, planta__isnull=True)
                    | models.Q(empreendimento__isnull=True, planta__isnull=True)
                ),
                name="anexo_single_owner",
            ),
        ]

    def __str__(self):
        return self.nome
