"""Limites impostos pela API Mailgun."""

MAX_CAMPAIGNS_PER_MESSAGE = 3
