def make_payload(count: int, region: str = "eu") -> list[dict]:
    return [
        {
            "lobbyId": f"lobby-{n}",
            "ip": f"10.0.0.{n}",
            "port": 7000 + n,
            "players": n,
            "maxPlayers": 16,
            "region": region,
            "steamId": f"7656119{n:010d}",
            "version": "1.2.0",
        }
        for n in range(count)
    ]
