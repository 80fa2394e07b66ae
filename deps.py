"""Centralized imports for the API layer (app)."""

# Standard library
import json
import logging
from datetime import datetime, timezone
from typing import Callable, List, Optional, Union

# External
from fastapi import (
    APIRouter,
    Depends,
    Query,
)
from fastapi.responses import Response
