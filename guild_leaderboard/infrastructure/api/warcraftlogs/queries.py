"""
GraphQL documents for the Warcraft Logs v2 client API.
"""

GUILD_ROSTER_QUERY = """
query GuildRoster($guildName: String!, $serverRegion: String!, $serverSlug: String!) {
  guildData {
    guild(name: $guildName, serverRegion: $serverRegion, serverSlug: $serverSlug) {
      id
      name
      members {
        data {
          id
          name
          classID
          hidden
          server {
            slug
            name
            region {
              slug
            }
          }
        }
      }
    }
  }
}
"""

GAME_CLASSES_QUERY = """
query GameClasses {
  gameData {
    classes {
      id
      name
      slug
      specs {
        id
        name
        slug
      }
    }
  }
}
"""

# zoneRankings and gameData are JSON scalars: parsed objects or JSON strings
CHARACTER_RANKINGS_QUERY = """
query CharacterRankings(
  $name: String!
  $serverSlug: String!
  $serverRegion: String!
  $zoneID: Int!
  $difficulty: Int!
) {
  characterData {
    character(name: $name, serverSlug: $serverSlug, serverRegion: $serverRegion) {
      zoneRankings(zoneID: $zoneID, difficulty: $difficulty, metric: dps)
      gameData
      specRankings: zoneRankings(zoneID: $zoneID, difficulty: $difficulty, metric: dps, includeCombatantInfo: true)
    }
  }
}
"""
