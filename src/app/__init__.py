"""App — núcleo de domínio: modelos, constantes e contratos.

Subpastas:
- domain/: registros normalizados (ChannelInfo, CommunityPost, VideoRenderer, PlayerInfo)
- constants/: enums de domínio
- protocols/: contratos/interfaces

Padrão: api adapta; app define o domínio; config configura; utils apoia.
"""
