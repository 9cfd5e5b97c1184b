"""
Names and locations shared across loomdeps.
"""

CONFIG_MC_DEPENDENCIES = "minecraftDependencies"
CONFIG_MC_DEPENDENCIES_CLIENT = "minecraftClientDependencies"
CONFIG_NATIVES = "natives"

VERSION_MANIFEST_INDEX_URL = "https://launchermeta.mojang.com/mc/game/version_manifest.json"

# Libraries whose coordinate contains one of these are only needed on the client.
CLIENT_ONLY_KEYWORDS = ("java3d", "paulscode", "lwjgl", "twitch", "jinput")

MINECRAFT_GROUP = "net.minecraft"
FABRIC_BASE_ARTIFACT = "net.fabricmc:fabric-base"

MOJANG_REPOSITORY = ("Mojang", "https://libraries.minecraft.net/")
FABRIC_REPOSITORY = ("FabricMC", "https://maven.fabricmc.net/")
SPONGE_REPOSITORY = ("SpongePowered", "https://repo.spongepowered.org/maven")
MAVEN_CENTRAL_REPOSITORY = ("MavenRepo", "https://repo.maven.apache.org/maven2/")
JCENTER_REPOSITORY = ("BintrayJCenter", "https://jcenter.bintray.com/")
CACHE_FILES_REPOSITORY_NAME = "LoomCacheFiles"

REQUEST_TIMEOUT = 30
