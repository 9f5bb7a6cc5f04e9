"""
Seed Locations
地理搜索的种子坐标 (主要城市)

geosearch 每次尝试从这里随机抽取地点; 抽样逻辑在 orchestrator.search 中。
"""
from typing import NamedTuple, Tuple


class SeedLocation(NamedTuple):
    latitude: float
    longitude: float
    name: str


SEED_LOCATIONS: Tuple[SeedLocation, ...] = (
    SeedLocation(9.0579, 7.4951, "Abuja, Nigeria"),
    SeedLocation(6.5244, 3.3792, "Lagos, Nigeria"),
    SeedLocation(11.0167, 7.9000, "Kano, Nigeria"),
    SeedLocation(5.5560, -0.1969, "Accra, Ghana"),
    SeedLocation(9.0300, 38.7400, "Addis Ababa, Ethiopia"),
    SeedLocation(36.7538, 3.0588, "Algiers, Algeria"),
    SeedLocation(-8.8390, 13.2894, "Luanda, Angola"),
    SeedLocation(-26.2041, 28.0473, "Johannesburg, South Africa"),
    SeedLocation(-33.9249, 18.4241, "Cape Town, South Africa"),
    SeedLocation(-29.8587, 31.0218, "Durban, South Africa"),
    SeedLocation(-25.7479, 28.2293, "Pretoria, South Africa"),
    SeedLocation(30.0444, 31.2357, "Cairo, Egypt"),
    SeedLocation(31.2001, 29.9187, "Alexandria, Egypt"),
    SeedLocation(36.8065, 10.1815, "Tunis, Tunisia"),
    SeedLocation(33.5731, -7.5898, "Casablanca, Morocco"),
    SeedLocation(-17.8252, 31.0335, "Harare, Zimbabwe"),
    SeedLocation(-1.9441, 30.0619, "Kigali, Rwanda"),
    SeedLocation(6.1319, 1.2228, "Lomé, Togo"),
    SeedLocation(32.8872, 13.1913, "Tripoli, Libya"),
    SeedLocation(-22.5597, 17.0832, "Windhoek, Namibia"),
    SeedLocation(15.5007, 32.5599, "Khartoum, Sudan"),
    SeedLocation(-26.3054, 31.1367, "Mbabane, Eswatini"),
    SeedLocation(12.3714, -1.5197, "Ouagadougou, Burkina Faso"),
    SeedLocation(5.3600, -4.0083, "Abidjan, Côte d'Ivoire"),
    SeedLocation(12.6392, -8.0029, "Bamako, Mali"),
    SeedLocation(18.0735, -15.9582, "Nouakchott, Mauritania"),
    SeedLocation(14.6928, -17.4467, "Dakar, Senegal"),
    SeedLocation(-4.4419, 15.2663, "Kinshasa, DRC"),
    SeedLocation(-11.2027, 27.4740, "Lubumbashi, DRC"),
    SeedLocation(0.3476, 32.5825, "Kampala, Uganda"),
    SeedLocation(-6.7924, 39.2083, "Dar es Salaam, Tanzania"),
    SeedLocation(39.9042, 116.4074, "Beijing, China"),
    SeedLocation(31.2304, 121.4737, "Shanghai, China"),
    SeedLocation(23.1291, 113.2644, "Guangzhou, China"),
    SeedLocation(39.0851, 117.1995, "Tianjin, China"),
    SeedLocation(22.3193, 114.1694, "Hong Kong"),
    SeedLocation(28.6139, 77.2090, "New Delhi, India"),
    SeedLocation(19.0760, 72.8777, "Mumbai, India"),
    SeedLocation(13.0827, 80.2707, "Chennai, India"),
    SeedLocation(22.5726, 88.3639, "Kolkata, India"),
    SeedLocation(12.9716, 77.5946, "Bangalore, India"),
    SeedLocation(17.3850, 78.4867, "Hyderabad, India"),
    SeedLocation(18.5204, 73.8567, "Pune, India"),
    SeedLocation(23.0225, 72.5714, "Ahmedabad, India"),
    SeedLocation(26.9124, 75.7873, "Jaipur, India"),
    SeedLocation(28.7041, 77.1025, "Delhi, India"),
    SeedLocation(35.6762, 139.6503, "Tokyo, Japan"),
    SeedLocation(34.6937, 135.5023, "Osaka, Japan"),
    SeedLocation(35.4437, 139.6380, "Yokohama, Japan"),
    SeedLocation(37.5665, 126.9780, "Seoul, South Korea"),
    SeedLocation(35.1796, 129.0756, "Busan, South Korea"),
    SeedLocation(21.0285, 105.8542, "Hanoi, Vietnam"),
    SeedLocation(10.8231, 106.6297, "Ho Chi Minh City, Vietnam"),
    SeedLocation(13.7563, 100.5018, "Bangkok, Thailand"),
    SeedLocation(3.1390, 101.6869, "Kuala Lumpur, Malaysia"),
    SeedLocation(1.3521, 103.8198, "Singapore"),
    SeedLocation(-6.2088, 106.8456, "Jakarta, Indonesia"),
    SeedLocation(-7.2575, 112.7521, "Surabaya, Indonesia"),
    SeedLocation(-6.9175, 107.6191, "Bandung, Indonesia"),
    SeedLocation(3.5952, 98.6722, "Medan, Indonesia"),
    SeedLocation(14.5995, 120.9842, "Manila, Philippines"),
    SeedLocation(10.3157, 123.8854, "Cebu City, Philippines"),
    SeedLocation(7.0731, 125.6128, "Davao, Philippines"),
    SeedLocation(23.8103, 90.4125, "Dhaka, Bangladesh"),
    SeedLocation(22.3569, 91.7832, "Chittagong, Bangladesh"),
    SeedLocation(27.7172, 85.3240, "Kathmandu, Nepal"),
    SeedLocation(6.9271, 79.8612, "Colombo, Sri Lanka"),
    SeedLocation(24.8607, 67.0011, "Karachi, Pakistan"),
    SeedLocation(31.5804, 74.3587, "Lahore, Pakistan"),
    SeedLocation(33.6844, 73.0479, "Islamabad, Pakistan"),
    SeedLocation(34.5553, 69.2075, "Kabul, Afghanistan"),
    SeedLocation(38.8951, 71.4677, "Dushanbe, Tajikistan"),
    SeedLocation(41.2995, 69.2401, "Tashkent, Uzbekistan"),
    SeedLocation(42.8746, 74.5698, "Bishkek, Kyrgyzstan"),
    SeedLocation(37.9601, 58.3261, "Ashgabat, Turkmenistan"),
    SeedLocation(25.0330, 121.5654, "Taipei, Taiwan"),
    SeedLocation(39.0392, 125.7625, "Pyongyang, North Korea"),
    SeedLocation(51.5074, -0.1278, "London, United Kingdom"),
    SeedLocation(53.4808, -2.2426, "Manchester, United Kingdom"),
    SeedLocation(55.8642, -4.2518, "Glasgow, United Kingdom"),
    SeedLocation(52.4862, -1.8904, "Birmingham, United Kingdom"),
    SeedLocation(48.8566, 2.3522, "Paris, France"),
    SeedLocation(45.7640, 4.8357, "Lyon, France"),
    SeedLocation(43.2965, 5.3698, "Marseille, France"),
    SeedLocation(52.5200, 13.4050, "Berlin, Germany"),
    SeedLocation(48.1351, 11.5820, "Munich, Germany"),
    SeedLocation(50.1109, 8.6821, "Frankfurt, Germany"),
    SeedLocation(51.2277, 6.7735, "Düsseldorf, Germany"),
    SeedLocation(53.5511, 9.9937, "Hamburg, Germany"),
    SeedLocation(50.9375, 6.9603, "Cologne, Germany"),
    SeedLocation(41.9028, 12.4964, "Rome, Italy"),
    SeedLocation(45.4642, 9.1900, "Milan, Italy"),
    SeedLocation(40.8518, 14.2681, "Naples, Italy"),
    SeedLocation(45.0703, 7.6869, "Turin, Italy"),
    SeedLocation(40.4168, -3.7038, "Madrid, Spain"),
    SeedLocation(41.3851, 2.1734, "Barcelona, Spain"),
    SeedLocation(37.3891, -5.9845, "Seville, Spain"),
    SeedLocation(39.4699, -0.3763, "Valencia, Spain"),
    SeedLocation(38.7223, -9.1393, "Lisbon, Portugal"),
    SeedLocation(41.1579, -8.6291, "Porto, Portugal"),
    SeedLocation(52.3676, 4.9041, "Amsterdam, Netherlands"),
    SeedLocation(51.9244, 4.4777, "Rotterdam, Netherlands"),
    SeedLocation(50.8503, 4.3517, "Brussels, Belgium"),
    SeedLocation(46.9481, 7.4474, "Bern, Switzerland"),
    SeedLocation(47.3769, 8.5417, "Zurich, Switzerland"),
    SeedLocation(48.2082, 16.3738, "Vienna, Austria"),
    SeedLocation(59.9139, 10.7522, "Oslo, Norway"),
    SeedLocation(59.3293, 18.0686, "Stockholm, Sweden"),
    SeedLocation(57.7089, 11.9746, "Gothenburg, Sweden"),
    SeedLocation(60.1699, 24.9384, "Helsinki, Finland"),
    SeedLocation(55.6761, 12.5683, "Copenhagen, Denmark"),
    SeedLocation(64.1466, -21.9426, "Reykjavik, Iceland"),
    SeedLocation(53.3498, -6.2603, "Dublin, Ireland"),
    SeedLocation(55.7558, 37.6176, "Moscow, Russia"),
    SeedLocation(59.9311, 30.3609, "Saint Petersburg, Russia"),
    SeedLocation(55.7887, 49.1221, "Kazan, Russia"),
    SeedLocation(56.8431, 60.6454, "Yekaterinburg, Russia"),
    SeedLocation(55.0084, 82.9357, "Novosibirsk, Russia"),
    SeedLocation(50.4501, 30.5234, "Kyiv, Ukraine"),
    SeedLocation(49.9935, 36.2304, "Kharkiv, Ukraine"),
    SeedLocation(46.4825, 30.7233, "Odesa, Ukraine"),
    SeedLocation(52.2297, 21.0122, "Warsaw, Poland"),
    SeedLocation(50.2649, 19.0238, "Krakow, Poland"),
    SeedLocation(51.7592, 19.4560, "Łódź, Poland"),
    SeedLocation(50.0755, 14.4378, "Prague, Czech Republic"),
    SeedLocation(49.1951, 16.6068, "Brno, Czech Republic"),
    SeedLocation(47.4979, 19.0402, "Budapest, Hungary"),
    SeedLocation(44.4268, 26.1025, "Bucharest, Romania"),
    SeedLocation(45.7489, 21.2087, "Timișoara, Romania"),
    SeedLocation(42.6977, 23.3219, "Sofia, Bulgaria"),
    SeedLocation(37.9838, 23.7275, "Athens, Greece"),
    SeedLocation(40.6401, 22.9444, "Thessaloniki, Greece"),
    SeedLocation(35.1676, 33.3736, "Nicosia, Cyprus"),
    SeedLocation(45.8150, 15.9819, "Zagreb, Croatia"),
    SeedLocation(46.0569, 14.5058, "Ljubljana, Slovenia"),
    SeedLocation(43.8563, 18.4131, "Sarajevo, Bosnia and Herzegovina"),
    SeedLocation(42.4304, 19.2594, "Podgorica, Montenegro"),
    SeedLocation(42.0000, 21.4333, "Skopje, North Macedonia"),
    SeedLocation(41.3275, 19.8187, "Tirana, Albania"),
    SeedLocation(44.8176, 20.4633, "Belgrade, Serbia"),
    SeedLocation(41.0082, 28.9784, "Istanbul, Turkey"),
    SeedLocation(38.9072, -77.0369, "Washington D.C., USA"),
    SeedLocation(40.7128, -74.0060, "New York City, USA"),
    SeedLocation(34.0522, -118.2437, "Los Angeles, USA"),
    SeedLocation(41.8781, -87.6298, "Chicago, USA"),
    SeedLocation(29.7604, -95.3698, "Houston, USA"),
    SeedLocation(33.4484, -112.0740, "Phoenix, USA"),
    SeedLocation(39.7392, -104.9903, "Denver, USA"),
    SeedLocation(32.7767, -96.7970, "Dallas, USA"),
    SeedLocation(37.7749, -122.4194, "San Francisco, USA"),
    SeedLocation(47.6062, -122.3321, "Seattle, USA"),
    SeedLocation(25.7617, -80.1918, "Miami, USA"),
    SeedLocation(42.3601, -71.0589, "Boston, USA"),
    SeedLocation(39.2904, -76.6122, "Baltimore, USA"),
    SeedLocation(45.4215, -75.6972, "Ottawa, Canada"),
    SeedLocation(43.6532, -79.3832, "Toronto, Canada"),
    SeedLocation(45.5017, -73.5673, "Montreal, Canada"),
    SeedLocation(49.2827, -123.1207, "Vancouver, Canada"),
    SeedLocation(51.0447, -114.0719, "Calgary, Canada"),
    SeedLocation(53.5461, -113.4938, "Edmonton, Canada"),
    SeedLocation(19.4326, -99.1332, "Mexico City, Mexico"),
    SeedLocation(25.6866, -100.3161, "Monterrey, Mexico"),
    SeedLocation(20.6597, -103.3496, "Guadalajara, Mexico"),
    SeedLocation(21.1619, -86.8515, "Cancún, Mexico"),
    SeedLocation(32.5149, -117.0382, "Tijuana, Mexico"),
    SeedLocation(17.2510, -88.7590, "Belize City, Belize"),
    SeedLocation(14.0723, -87.1921, "Tegucigalpa, Honduras"),
    SeedLocation(12.1364, -86.2514, "Managua, Nicaragua"),
    SeedLocation(9.9281, -84.0907, "San José, Costa Rica"),
    SeedLocation(8.9824, -79.5199, "Panama City, Panama"),
    SeedLocation(-22.9068, -43.1729, "Rio de Janeiro, Brazil"),
    SeedLocation(-23.5558, -46.6396, "São Paulo, Brazil"),
    SeedLocation(-15.8267, -47.9218, "Brasília, Brazil"),
    SeedLocation(-30.0346, -51.2177, "Porto Alegre, Brazil"),
    SeedLocation(-19.9167, -43.9345, "Belo Horizonte, Brazil"),
    SeedLocation(-25.4284, -49.2733, "Curitiba, Brazil"),
    SeedLocation(-8.0476, -34.8770, "Recife, Brazil"),
    SeedLocation(-12.9714, -38.5014, "Salvador, Brazil"),
    SeedLocation(-3.7172, -38.5433, "Fortaleza, Brazil"),
    SeedLocation(-34.6037, -58.3816, "Buenos Aires, Argentina"),
    SeedLocation(-31.4201, -64.1888, "Córdoba, Argentina"),
    SeedLocation(-24.7821, -65.4232, "Salta, Argentina"),
    SeedLocation(-33.4489, -70.6693, "Santiago, Chile"),
    SeedLocation(-33.0472, -71.6127, "Valparaíso, Chile"),
    SeedLocation(4.7110, -74.0721, "Bogotá, Colombia"),
    SeedLocation(6.2442, -75.5812, "Medellín, Colombia"),
    SeedLocation(3.4516, -76.5320, "Cali, Colombia"),
    SeedLocation(11.0041, -74.8070, "Barranquilla, Colombia"),
    SeedLocation(-12.0464, -77.0428, "Lima, Peru"),
    SeedLocation(-16.4090, -71.5375, "Arequipa, Peru"),
    SeedLocation(10.4806, -66.9036, "Caracas, Venezuela"),
    SeedLocation(10.1597, -67.9111, "Valencia, Venezuela"),
    SeedLocation(8.5937, -71.1561, "Maracaibo, Venezuela"),
    SeedLocation(-17.7834, -63.1821, "Santa Cruz, Bolivia"),
    SeedLocation(-16.4897, -68.1193, "La Paz, Bolivia"),
    SeedLocation(-0.1807, -78.4678, "Quito, Ecuador"),
    SeedLocation(-2.1894, -79.8890, "Guayaquil, Ecuador"),
    SeedLocation(-3.1190, -60.0217, "Manaus, Brazil"),
    SeedLocation(-25.2637, -57.5759, "Asunción, Paraguay"),
    SeedLocation(-34.9011, -56.1645, "Montevideo, Uruguay"),
    SeedLocation(5.8520, -55.2038, "Paramaribo, Suriname"),
    SeedLocation(6.8013, -58.1551, "Georgetown, Guyana"),
    SeedLocation(-35.2809, 149.1300, "Canberra, Australia"),
    SeedLocation(-33.8688, 151.2093, "Sydney, Australia"),
    SeedLocation(-37.8136, 144.9631, "Melbourne, Australia"),
    SeedLocation(-27.4698, 153.0251, "Brisbane, Australia"),
    SeedLocation(-31.9505, 115.8605, "Perth, Australia"),
    SeedLocation(-34.9285, 138.6007, "Adelaide, Australia"),
    SeedLocation(-41.2865, 174.7762, "Wellington, New Zealand"),
    SeedLocation(-36.8485, 174.7633, "Auckland, New Zealand"),
    SeedLocation(-43.5321, 172.6362, "Christchurch, New Zealand"),
    SeedLocation(-17.7134, 168.3273, "Port Vila, Vanuatu"),
    SeedLocation(-9.4438, 159.9729, "Honiara, Solomon Islands"),
    SeedLocation(-18.1416, 178.4419, "Suva, Fiji"),
    SeedLocation(-21.1789, -175.1982, "Nuku'alofa, Tonga"),
    SeedLocation(-13.8506, -171.7513, "Apia, Samoa"),
    SeedLocation(7.5000, 134.6242, "Koror, Palau"),
    SeedLocation(39.9334, 32.8597, "Ankara, Turkey"),
    SeedLocation(33.3152, 44.3661, "Baghdad, Iraq"),
    SeedLocation(35.6892, 51.3890, "Tehran, Iran"),
    SeedLocation(29.5918, 52.5836, "Shiraz, Iran"),
    SeedLocation(36.2605, 59.6168, "Mashhad, Iran"),
    SeedLocation(38.0962, 46.2738, "Tabriz, Iran"),
    SeedLocation(31.7683, 35.2137, "Jerusalem, Israel"),
    SeedLocation(32.0853, 34.7818, "Tel Aviv, Israel"),
    SeedLocation(31.9539, 35.9106, "Amman, Jordan"),
    SeedLocation(33.8938, 35.5018, "Beirut, Lebanon"),
    SeedLocation(33.5138, 36.2765, "Damascus, Syria"),
    SeedLocation(36.2021, 37.1343, "Aleppo, Syria"),
    SeedLocation(29.3117, 47.4818, "Kuwait City, Kuwait"),
    SeedLocation(26.0667, 50.5577, "Manama, Bahrain"),
    SeedLocation(25.2048, 55.2708, "Dubai, UAE"),
    SeedLocation(24.4539, 54.3773, "Abu Dhabi, UAE"),
    SeedLocation(23.5859, 58.4059, "Muscat, Oman"),
    SeedLocation(25.2854, 51.5310, "Doha, Qatar"),
    SeedLocation(24.7136, 46.6753, "Riyadh, Saudi Arabia"),
    SeedLocation(21.3891, 39.8579, "Mecca, Saudi Arabia"),
    SeedLocation(21.4858, 39.1925, "Jeddah, Saudi Arabia"),
    SeedLocation(15.3694, 44.1910, "Sana'a, Yemen"),
)
