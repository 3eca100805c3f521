# -*- coding: utf-8 -*-
"""
样式数据编解码模块

Style <-> JSON 的双向转换，保证 decode(encode(style)) == style。
"""

from .converter import (
    CodecError,
    DecodeError,
    EncodeError,
    decode,
    encode,
    structure,
    unstructure,
)

__all__ = [
    "CodecError",
    "DecodeError",
    "EncodeError",
    "decode",
    "encode",
    "structure",
    "unstructure",
]
