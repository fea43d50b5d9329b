"""English page copy for SEO metadata."""

EN_STRINGS = {
    # === SITE ===
    "site_description": (
        "Apoxer is a gaming matchmaking platform to find players, join live lobbies, "
        "and explore communities across thousands of games."
    ),

    # === STATIC PAGES ===
    "page_home_title": "Find Players, Join Lobbies, Discover Gaming Communities",
    "page_home_description": (
        "APOXER.COM is a gaming matchmaking platform intended for both game players and gaming "
        "communities. Find players, join live lobbies, discover games, and connect with thousands "
        "of gamers worldwide."
    ),
    "page_about_title": "About Apoxer",
    "page_about_description": (
        "Apoxer is a gaming matchmaking and community discovery platform that helps players "
        "find others to play with in real time."
    ),
    "page_games_title": "Browse Games & Communities - Gaming Matchmaking",
    "page_games_description": (
        "Discover thousands of games, browse active gaming communities, find players, and join "
        "live lobbies. Search any game and connect with fellow gamers on APOXER.COM."
    ),
    "page_events_title": "Upcoming Gaming Events - Join Community Events",
    "page_events_description": (
        "Discover and join upcoming gaming events, weekly community votes, and scheduled gaming "
        "sessions. Find players for your favorite games and participate in community-driven "
        "events on APOXER.COM."
    ),
    "page_features_title": "Product Features - Gaming Matchmaking Platform",
    "page_features_description": (
        "Explore Apoxer features: game discovery, lobby system, player matchmaking, tournaments, "
        "events, and social features. Learn how to find players, join lobbies, and build your "
        "gaming community."
    ),
    "page_invites_title": "Invites",
    "page_invites_description": "View and manage your lobby invites on APOXER.COM.",
    "page_marketing_title": "Find Players, Join Lobbies, Discover Communities",
    "page_marketing_description": (
        "Find players for any game—fast. Join short-lived lobbies, discover game communities, "
        "and make fragmented multiplayer games visible again. No Discord hunting required."
    ),
    "page_search_title": "Search Games - Find Games & Communities",
    "page_search_description": (
        "Search for games, gaming communities, and players. Find any game from thousands of "
        "titles and discover active lobbies and communities on APOXER.COM."
    ),
    "page_social_title": "Connect with players",
    "page_social_description": "Track your gaming network activity.",
    "page_tournaments_title": "Create & join tournaments",
    "page_tournaments_description": "Create and join gaming tournaments on APOXER.COM.",

    # === GAME PAGE ===
    "game_fallback_title": "Game",
    "game_fallback_description": "Join game lobbies, find teammates, and explore communities on Apoxer.",
    "game_description": "Join {name} lobbies, find teammates, and explore communities on Apoxer.",

    # === LOBBY PAGE ===
    "lobby_fallback_title": "Lobby {lobby_id}",
    "lobby_title": "Lobby for {game_name}",
    "lobby_default_game": "Game",
    "lobby_description": "Join this lobby on Apoxer to match with players and coordinate your next session.",

    # === PLAYER PAGE ===
    "player_fallback_title": "Player Profile",
    "player_fallback_description": "View player profile, games, lobbies, and matchmaking activity on Apoxer.",
    "player_description": "View {name}'s games, lobbies, and matchmaking activity on Apoxer.",
}
