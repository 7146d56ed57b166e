from enum import Enum


class ImageFormat(str, Enum):
    gif = "gif"
    webp = "webp"
    avif = "avif"


class Reaction(str, Enum):
    airkiss = "airkiss"
    angrystare = "angrystare"
    bite = "bite"
    bleh = "bleh"
    blush = "blush"
    brofist = "brofist"
    celebrate = "celebrate"
    cheers = "cheers"
    clap = "clap"
    confused = "confused"
    cool = "cool"
    cry = "cry"
    cuddle = "cuddle"
    dance = "dance"
    drool = "drool"
    evillaugh = "evillaugh"
    facepalm = "facepalm"
    handhold = "handhold"
    happy = "happy"
    headbang = "headbang"
    hug = "hug"
    huh = "huh"
    kiss = "kiss"
    laugh = "laugh"
    lick = "lick"
    love = "love"
    mad = "mad"
    nervous = "nervous"
    no = "no"
    nom = "nom"
    nosebleed = "nosebleed"
    nuzzle = "nuzzle"
    nyah = "nyah"
    pat = "pat"
    peek = "peek"
    pinch = "pinch"
    poke = "poke"
    pout = "pout"
    punch = "punch"
    roll = "roll"
    run = "run"
    sad = "sad"
    scared = "scared"
    shout = "shout"
    shrug = "shrug"
    shy = "shy"
    sigh = "sigh"
    sip = "sip"
    slap = "slap"
    sleep = "sleep"
    slowclap = "slowclap"
    smack = "smack"
    smile = "smile"
    smug = "smug"
    sneeze = "sneeze"
    sorry = "sorry"
    stare = "stare"
    stop = "stop"
    surprised = "surprised"
    sweat = "sweat"
    thumbsup = "thumbsup"
    tickle = "tickle"
    tired = "tired"
    wave = "wave"
    wink = "wink"
    woah = "woah"
    yawn = "yawn"
    yay = "yay"
    yes = "yes"
