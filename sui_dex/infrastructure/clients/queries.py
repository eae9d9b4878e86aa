from __future__ import annotations


COIN_SETTING_QUERY = """
query GetCoinsSettings($limit: Float) {
  getCoinsSettings(limit: $limit) {
    items {
      type
      decimals
      symbol
      name
      iconUrl
    }
  }
}
"""

GET_PAIRS = """
query GetPairs($size: Float) {
  getPairs(size: $size) {
    lpObjectId
    coinXType
    coinYType
    lpName
    liquidityUsd
    volume24h
  }
}
"""
