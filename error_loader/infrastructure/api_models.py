"""
Pydantic models for the notice documents exchanged with Honeybadger.

The same models describe what is reported and what is read back. Every field
is optional because the read API returns only part of what was submitted,
and unknown fields are ignored so that additions on the service side do not
break loading.
"""

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class Notifier(BaseModel):
    """Identifies the library that reported the error."""

    name: Optional[str] = None
    url: Optional[str] = None
    version: Optional[str] = None
    language: Optional[str] = None


class BacktraceElement(BaseModel):
    """A single frame of an error's backtrace."""

    number: Optional[Union[int, str]] = None
    file: Optional[str] = None
    method: Optional[str] = None
    context: Optional[str] = None


class ErrorDetails(BaseModel):
    """
    The error itself: its class, message and backtrace.

    The JSON key ``class`` is exposed as ``class_name``.
    """

    model_config = ConfigDict(populate_by_name=True)

    class_name: Optional[str] = Field(default=None, alias="class")
    message: Optional[str] = None
    backtrace: Optional[List[BacktraceElement]] = None
    causes: Optional[List["ErrorDetails"]] = None
    tags: Optional[List[str]] = None
    fingerprint: Optional[str] = None


class Request(BaseModel):
    """
    The request context the error happened in.

    Fields beyond the known ones are kept and exposed via ``model_extra``.
    """

    model_config = ConfigDict(extra="allow")

    url: Optional[str] = None
    component: Optional[str] = None
    action: Optional[str] = None
    params: Optional[Dict[str, Any]] = None
    session: Optional[Dict[str, Any]] = None
    context: Optional[Dict[str, Any]] = None
    cgi_data: Optional[Dict[str, Any]] = None


class Memory(BaseModel):
    """Memory statistics of the reporting host, in megabytes."""

    total: Optional[float] = None
    free: Optional[float] = None
    buffers: Optional[float] = None
    cached: Optional[float] = None
    free_total: Optional[float] = None


class Load(BaseModel):
    """Load averages of the reporting host."""

    one: Optional[float] = None
    five: Optional[float] = None
    fifteen: Optional[float] = None


class Stats(BaseModel):
    """Host statistics captured when the error occurred."""

    mem: Optional[Memory] = None
    load: Optional[Load] = None


class ServerDetails(BaseModel):
    """Server details at the time an error occurred."""

    environment_name: Optional[str] = None
    hostname: Optional[str] = None
    project_root: Optional[str] = None
    pid: Optional[int] = None
    time: Optional[str] = None
    stats: Optional[Stats] = None


class ReportedError(BaseModel):
    """Represents the top-level structure of a notice."""

    notifier: Optional[Notifier] = None
    error: Optional[ErrorDetails] = None
    request: Optional[Request] = None
    server: Optional[ServerDetails] = None
    details: Optional[Dict[str, Any]] = None
