"""
Canonical MLB reference tables.

Ids are the statsapi ids, e.g.:
    https://statsapi.mlb.com/api/v1/league/103
    https://statsapi.mlb.com/api/v1/divisions/201
    https://statsapi.mlb.com/api/v1/teams/111
"""

from refdata.models import Division, League, Team, Venue

LEAGUES = (
    League(
        name="American League",
        abbreviation="AL",
        id="103",
        divisions=("201", "202", "200"),
    ),
    League(
        name="National League",
        abbreviation="NL",
        id="104",
        divisions=("204", "205", "203"),
    ),
)

DIVISIONS = (
    Division(
        name="AL East",
        abbreviation="E",
        id="201",
        league_id="103",
        teams=("111", "110", "147", "141", "139"),
    ),
    Division(
        name="AL Central",
        abbreviation="C",
        id="202",
        league_id="103",
        teams=("114", "145", "142", "118", "116"),
    ),
    Division(
        name="AL West",
        abbreviation="W",
        id="200",
        league_id="103",
        teams=("108", "136", "133", "117", "140"),
    ),
    Division(
        name="NL East",
        abbreviation="E",
        id="204",
        league_id="104",
        teams=("121", "143", "144", "146", "120"),
    ),
    Division(
        name="NL Central",
        abbreviation="C",
        id="205",
        league_id="104",
        teams=("112", "158", "113", "138", "134"),
    ),
    Division(
        name="NL West",
        abbreviation="W",
        id="203",
        league_id="104",
        # Padres are "135"; "145" is the White Sox
        teams=("119", "137", "135", "115", "109"),
    ),
)

# Alphabetical by team name
TEAMS = (
    Team(
        id="109",
        name="Arizona Diamondbacks",
        franchise_name="Arizona",
        club_name="Diamondbacks",  # statsapi teamName
        abbreviation="ARI",
        league_id="104",
        division_id="203",
        background_color="#A71930",
        accent_color="#E3D4AD",
        text_color="#FFFFFF",
        time_zone="America/Los_Angeles",
        venue_id="15",
    ),
    Team(
        id="144",
        name="Atlanta Braves",
        franchise_name="Atlanta",
        club_name="Braves",
        abbreviation="ATL",
        league_id="104",
        division_id="204",
        background_color="#13274F",
        accent_color="#CE1141",
        text_color="#FFFFFF",
        time_zone="America/New_York",
        venue_id="4705",
    ),
    Team(
        id="110",
        name="Baltimore Orioles",
        franchise_name="Baltimore",
        club_name="Orioles",
        abbreviation="BAL",
        league_id="103",
        division_id="201",
        background_color="#DF4601",
        accent_color="#000000",
        text_color="#FFFFFF",
        time_zone="America/New_York",
        venue_id="2",
    ),
    Team(
        id="111",
        name="Boston Red Sox",
        franchise_name="Boston",
        club_name="Red Sox",
        abbreviation="BOS",
        league_id="103",
        division_id="201",
        background_color="#BD3039",
        accent_color="#0C2340",
        text_color="#FFFFFF",
        time_zone="America/New_York",
        venue_id="3",
    ),
    Team(
        id="112",
        name="Chicago Cubs",
        franchise_name="Chicago",
        club_name="Cubs",
        abbreviation="CHC",
        league_id="104",
        division_id="205",
        background_color="#0E3386",
        accent_color="#CC3433",
        text_color="#FFFFFF",
        time_zone="America/Chicago",
        venue_id="17",
    ),
    Team(
        id="145",
        name="Chicago White Sox",
        franchise_name="Chicago",
        club_name="White Sox",
        abbreviation="CWS",
        league_id="103",
        division_id="202",
        background_color="#27251F",
        accent_color="#C4CED4",
        text_color="#FFFFFF",
        time_zone="America/Chicago",
        venue_id="4",
    ),
    Team(
        id="113",
        name="Cincinnati Reds",
        franchise_name="Cincinnati",
        club_name="Reds",
        abbreviation="CIN",
        league_id="104",
        division_id="205",
        background_color="#C6011F",
        accent_color="#000000",
        text_color="#FFFFFF",
        time_zone="America/New_York",
        venue_id="2602",
    ),
    Team(
        id="115",
        name="Colorado Rockies",
        franchise_name="Colorado",
        club_name="Rockies",
        abbreviation="COL",
        league_id="104",
        division_id="203",
        background_color="#33006F",
        accent_color="#C4CED4",
        text_color="#C4CED4",
        time_zone="America/Denver",
        venue_id="19",
    ),
    Team(
        id="114",
        name="Cleveland Guardians",
        franchise_name="Cleveland",
        club_name="Guardians",
        abbreviation="CLE",
        league_id="103",
        division_id="202",
        background_color="#0C2340",
        accent_color="#E31937",
        text_color="#FFFFFF",
        time_zone="America/New_York",
        venue_id="5",
    ),
    Team(
        id="116",
        name="Detroit Tigers",
        franchise_name="Detroit",
        club_name="Tigers",
        abbreviation="DET",
        league_id="103",
        division_id="202",
        background_color="#0C2340",
        accent_color="#FA4616",
        text_color="#FFFFFF",
        time_zone="America/Chicago",
        venue_id="2394",
    ),
    Team(
        id="117",
        name="Houston Astros",
        franchise_name="Houston",
        club_name="Astros",
        abbreviation="HOU",
        league_id="103",
        division_id="200",
        background_color="#002D62",
        accent_color="#EB6E1F",
        text_color="#FFFFFF",
        time_zone="America/Chicago",
        venue_id="2392",
    ),
    Team(
        id="118",
        name="Kansas City Royals",
        franchise_name="Kansas City",
        club_name="Royals",
        abbreviation="KC",
        league_id="103",
        division_id="202",
        background_color="#004687",
        accent_color="#BD9B60",
        text_color="#FFFFFF",
        time_zone="America/Chicago",
        venue_id="7",
    ),
    Team(
        id="108",
        name="Los Angeles Angels",
        franchise_name="Anaheim",
        club_name="Angels",
        abbreviation="LAA",
        league_id="103",
        division_id="200",
        background_color="#BA0021",
        accent_color="#003263",
        text_color="#C4CED4",
        time_zone="America/Los_Angeles",
        venue_id="1",
    ),
    Team(
        id="119",
        name="Los Angeles Dodgers",
        franchise_name="Los Angeles",
        club_name="Dodgers",
        abbreviation="LAD",
        league_id="104",
        division_id="203",
        background_color="#005A9C",
        accent_color="#EF3E42",
        text_color="#FFFFFF",
        time_zone="America/Los_Angeles",
        venue_id="22",
    ),
    Team(
        id="146",
        name="Miami Marlins",
        franchise_name="Miami",
        club_name="Marlins",
        abbreviation="MIA",
        league_id="104",
        division_id="204",
        background_color="#000000",
        accent_color="#00A3E0",
        text_color="#FFFFFF",
        time_zone="America/New_York",
        venue_id="4169",
    ),
    Team(
        id="158",
        name="Milwaukee Brewers",
        franchise_name="Milwaukee",
        club_name="Brewers",
        abbreviation="MIL",
        league_id="104",
        division_id="205",
        background_color="#12284B",
        accent_color="#FFC52F",
        text_color="#FFFFFF",
        time_zone="America/Chicago",
        venue_id="32",
    ),
    Team(
        id="142",
        name="Minnesota Twins",
        franchise_name="Minnesota",
        club_name="Twins",
        abbreviation="MIN",
        league_id="103",
        division_id="202",
        background_color="#002B5C",
        accent_color="#D31145",
        text_color="#FFFFFF",
        time_zone="America/Chicago",
        venue_id="3312",
    ),
    Team(
        id="121",
        name="New York Mets",
        franchise_name="New York",
        club_name="Mets",
        abbreviation="NYM",
        league_id="104",
        division_id="204",
        background_color="#002D72",
        accent_color="#FF5910",
        text_color="#FFFFFF",
        time_zone="America/New_York",
        venue_id="3289",
    ),
    Team(
        id="147",
        name="New York Yankees",
        franchise_name="New York",
        club_name="Yankees",
        abbreviation="NYY",
        league_id="103",
        division_id="201",
        background_color="#003087",
        accent_color="#E4002C",
        text_color="#FFFFFF",
        time_zone="America/New_York",
        venue_id="3313",
    ),
    Team(
        id="133",
        name="Oakland Athletics",
        franchise_name="Oakland",
        club_name="Athletics",
        abbreviation="OAK",
        league_id="103",
        division_id="200",
        background_color="#003831",
        accent_color="#EFB21E",
        text_color="#FFFFFF",
        time_zone="America/Los_Angeles",
        venue_id="10",
    ),
    Team(
        id="143",
        name="Philadelphia Phillies",
        franchise_name="Philadelphia",
        club_name="Phillies",
        abbreviation="PHI",
        league_id="104",
        division_id="204",
        background_color="#E81828",
        accent_color="#002D72",
        text_color="#FFFFFF",
        time_zone="America/New_York",
        venue_id="2681",
    ),
    Team(
        id="134",
        name="Pittsburgh Pirates",
        franchise_name="Pittsburgh",
        club_name="Pirates",
        abbreviation="PIT",
        league_id="104",
        division_id="205",
        background_color="#27251F",
        accent_color="#FDB827",
        text_color="#FFFFFF",
        time_zone="America/New_York",
        venue_id="31",
    ),
    Team(
        id="135",
        name="San Diego Padres",
        franchise_name="San Diego",
        club_name="Padres",
        abbreviation="SD",
        league_id="104",
        division_id="203",
        background_color="#2F241D",
        accent_color="#FFC425",
        text_color="#FFFFFF",
        time_zone="America/Los_Angeles",
        venue_id="2680",
    ),
    Team(
        id="137",
        name="San Francisco Giants",
        franchise_name="San Francisco",
        club_name="Giants",
        abbreviation="SF",
        league_id="104",
        division_id="203",
        background_color="#FD5A1E",
        accent_color="#27251F",
        text_color="#FFFFFF",
        time_zone="America/Los_Angeles",
        venue_id="2395",
    ),
    Team(
        id="136",
        name="Seattle Mariners",
        franchise_name="Seattle",
        club_name="Mariners",
        abbreviation="SEA",
        league_id="103",
        division_id="200",
        background_color="#0C2C56",
        accent_color="#005C5C",
        text_color="#C4CED4",
        time_zone="America/Los_Angeles",
        venue_id="680",
    ),
    Team(
        id="138",
        name="St Louis Cardinals",
        franchise_name="St Louis",
        club_name="Cardinals",
        abbreviation="STL",
        league_id="104",
        division_id="205",
        background_color="#C41E3A",
        accent_color="#FEDB00",
        text_color="#FFFFFF",
        time_zone="America/Chicago",
        venue_id="2889",
    ),
    Team(
        id="139",
        name="Tampa Bay Rays",
        franchise_name="Tampa Bay",
        club_name="Rays",
        abbreviation="TB",
        league_id="103",
        division_id="201",
        background_color="#092C5C",
        accent_color="#8FBCE6",
        text_color="#F5D130",
        time_zone="America/New_York",
        venue_id="12",
    ),
    Team(
        id="140",
        name="Texas Rangers",
        franchise_name="Texas",
        club_name="Rangers",
        abbreviation="TEX",
        league_id="103",
        division_id="200",
        background_color="#003278",
        accent_color="#C0111F",
        text_color="#FFFFFF",
        time_zone="America/Chicago",
        venue_id="5325",
    ),
    Team(
        id="141",
        name="Toronto Blue Jays",
        franchise_name="Toronto",
        club_name="Blue Jays",
        abbreviation="TOR",
        league_id="103",
        division_id="201",
        background_color="#134A8E",
        accent_color="#E8291C",
        text_color="#FFFFFF",
        time_zone="America/New_York",
        venue_id="14",
    ),
    Team(
        id="120",
        name="Washington Nationals",
        franchise_name="Washington",
        club_name="Nationals",
        abbreviation="WSH",
        league_id="104",
        division_id="204",
        background_color="#AB0003",
        accent_color="#14225A",
        text_color="#FFFFFF",
        time_zone="America/New_York",
        venue_id="3309",
    ),
)

# Only Fenway has its own palette (Green Monster); the rest share the default
_DEFAULT_COLORS = dict(
    background_color="#0066DD",
    background_color2="#004D99",
    accent_color="#E0E0E0",
    text_color="#E0E0E0",
)

VENUES = (
    Venue(id="2", short_name="", name="Oriole Park at Camden Yards",
          time_zone="America/New_York", **_DEFAULT_COLORS),
    Venue(id="3", short_name="Fenway", name="Fenway Park",
          background_color="#54796D", background_color2="#44655D",
          accent_color="#E0E0E0", text_color="#E0E0E0",
          time_zone="America/New_York"),
    Venue(id="3313", short_name="", name="Yankee Stadium",
          time_zone="America/New_York", **_DEFAULT_COLORS),
    Venue(id="12", short_name="", name="Tropicana Field",
          time_zone="America/New_York", **_DEFAULT_COLORS),
    Venue(id="14", short_name="", name="Rogers Centre",
          time_zone="America/New_York", **_DEFAULT_COLORS),
    Venue(id="4", short_name="", name="Guaranteed Rate Field",
          time_zone="America/Chicago", **_DEFAULT_COLORS),
    Venue(id="5", short_name="", name="Progressive Field",
          time_zone="America/New_York", **_DEFAULT_COLORS),
    Venue(id="2394", short_name="", name="Comerica Park",
          time_zone="America/Chicago", **_DEFAULT_COLORS),
    Venue(id="7", short_name="", name="Kauffman Stadium",
          time_zone="America/Chicago", **_DEFAULT_COLORS),
    Venue(id="3312", short_name="", name="Target Field",
          time_zone="America/Chicago", **_DEFAULT_COLORS),
    Venue(id="2392", short_name="", name="Minute Maid Park",
          time_zone="America/Chicago", **_DEFAULT_COLORS),
    Venue(id="1", short_name="", name="Angel Stadium",
          time_zone="America/Los_Angeles", **_DEFAULT_COLORS),
    Venue(id="10", short_name="", name="Oakland Coliseum",
          time_zone="America/Los_Angeles", **_DEFAULT_COLORS),
    Venue(id="680", short_name="", name="T-Mobile Park",
          time_zone="America/Los_Angeles", **_DEFAULT_COLORS),
    # Arlington, TX: same zone as the Rangers
    Venue(id="5325", short_name="", name="Globe Life Field",
          time_zone="America/Chicago", **_DEFAULT_COLORS),
    Venue(id="4705", short_name="", name="Truist Park",
          time_zone="America/New_York", **_DEFAULT_COLORS),
    Venue(id="4169", short_name="", name="loanDepot park",
          time_zone="America/New_York", **_DEFAULT_COLORS),
    Venue(id="3289", short_name="", name="Citi Field",
          time_zone="America/New_York", **_DEFAULT_COLORS),
    Venue(id="2681", short_name="", name="Citizens Bank Park",
          time_zone="America/New_York", **_DEFAULT_COLORS),
    Venue(id="3309", short_name="", name="Nationals Park",
          time_zone="America/New_York", **_DEFAULT_COLORS),
    Venue(id="17", short_name="", name="Wrigley Field",
          time_zone="America/Chicago", **_DEFAULT_COLORS),
    Venue(id="2602", short_name="", name="Great American Ball Park",
          time_zone="America/New_York", **_DEFAULT_COLORS),
    Venue(id="32", short_name="", name="American Family Field",
          time_zone="America/Chicago", **_DEFAULT_COLORS),
    Venue(id="31", short_name="", name="PNC Park",
          time_zone="America/New_York", **_DEFAULT_COLORS),
    Venue(id="2889", short_name="", name="Busch Stadium",
          time_zone="America/Chicago", **_DEFAULT_COLORS),
    Venue(id="15", short_name="", name="Chase Field",
          time_zone="America/Los_Angeles", **_DEFAULT_COLORS),
    Venue(id="19", short_name="", name="Coors Field",
          time_zone="America/Denver", **_DEFAULT_COLORS),
    Venue(id="22", short_name="", name="Dodger Stadium",
          time_zone="America/Los_Angeles", **_DEFAULT_COLORS),
    Venue(id="2680", short_name="", name="Petco Park",
          time_zone="America/Los_Angeles", **_DEFAULT_COLORS),
    Venue(id="2395", short_name="", name="Oracle Park",
          time_zone="America/Los_Angeles", **_DEFAULT_COLORS),
)
