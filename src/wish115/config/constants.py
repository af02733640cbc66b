"""
Constantes globais do sistema Wish115.

Este módulo centraliza todas as constantes 'hardcoded' do sistema,
facilitando a manutenção e a aplicação do princípio DRY.
"""

from typing import Dict

# ============================================================================
# Logging
# ============================================================================

LEVEL_VALUES: Dict[str, int] = {
    "DEBUG": 10,
    "INFO": 20,
    "SUCCESS": 25,  # Nível customizado
    "WARNING": 30,
    "ERROR": 40,
    "CRITICAL": 50,
}

# ============================================================================
# URLs e Endpoints
# ============================================================================

API_BASE_URL = "https://act.115.com/api/1.0/web/1.0/act2024xys"

ENDPOINTS: Dict[str, str] = {
    "wish": "/wish",
    "my_desire": "/my_desire",
    "get_desire_info": "/get_desire_info",
    "aid_desire": "/aid_desire",
    "adopt": "/adopt",
}

ORIGIN = "https://v.115.com"

# ============================================================================
# Headers
# ============================================================================

DESKTOP_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/133.0.0.0 Safari/537.36"
)

MOBILE_USER_AGENT = (
    "Mozilla/5.0 (iPhone; CPU iPhone OS 12_3_1 like Mac OS X) AppleWebKit/605.1.15 "
    "(KHTML, like Gecko) Mobile/15E148 UDown/32.9.2"
)

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"

# Headers do navegador desktop (usados em quase todas as chamadas)
DESKTOP_HEADERS: Dict[str, str] = {
    "Accept": "application/json, text/plain, */*",
    "Accept-Language": "zh-CN,zh;q=0.9",
    "Cache-Control": "no-cache",
    "Origin": ORIGIN,
    "Referer": f"{ORIGIN}/",
    "User-Agent": DESKTOP_USER_AGENT,
    "sec-ch-ua": '"Not(A:Brand";v="99", "Google Chrome";v="133", "Chromium";v="133"',
    "sec-ch-ua-mobile": "?0",
    "sec-ch-ua-platform": '"Windows"',
}

# Headers do app mobile, exigidos pelo endpoint de ajuda
MOBILE_HEADERS: Dict[str, str] = {
    "Accept": "application/json, text/plain, */*",
    "Accept-Language": "zh-CN,zh-Hans;q=0.9",
    "Accept-Encoding": "gzip, deflate, br",
    "Sec-Fetch-Site": "same-site",
    "Sec-Fetch-Mode": "cors",
    "Sec-Fetch-Dest": "empty",
    "Origin": ORIGIN,
    "Referer": f"{ORIGIN}/",
    "User-Agent": MOBILE_USER_AGENT,
    "Connection": "keep-alive",
}

# ============================================================================
# Conteúdo fixo das requisições
# ============================================================================

LISTING_PARAMS: Dict[str, str] = {
    "type": "0",
    "start": "0",
    "page": "1",
    "limit": "10",
}

# ============================================================================
# Cadência (segundos)
# ============================================================================

DELAYS: Dict[str, float] = {
    "moderacao": 60,
    "resfriamento_ajuda": 10,
    "antes_adocao": 3,
    "entre_desejos": 60,
    "entre_contas": 30,
}

# ============================================================================
# Padrões e Timeouts
# ============================================================================

DEFAULTS = {
    "config_file": "config.yaml",
    "logs_dir": "logs",
    "log_file_prefix": "wish115",
    "log_format_date": "%Y-%m-%d %H:%M:%S",
    "timeout_api": 30,
    "wish_content": "gogogog",
    "reward_space": "5",
    "aid_content": "gogogo",
    "adopt_to_cid": "0",
}

ENV_PREFIX = "WISH115_"
COOKIE_LIST_SEPARATOR = "|"
