import pytest

from pilfflonk.field import FR_MODULUS
from pilfflonk.ntt import NUM_PHASES, NTT

FFT_SIZE = 1 << 4
NUM_REPS = 5
BLOWUP_FACTOR = 1
NUM_COLUMNS = 8
NPHASES = 4

LDE_EXPECTED = [
    "1",
    "12199744136350215368893260239437927912690930103873125685655434110751806988426",
    "1",
    "13413063301420227361219474278892191680737530348053495782569314555289601361708",
    "2",
    "8641579953475746055265511917813648377992510994588574752020338167013607187603",
    "3",
    "6543734385231615553058210196989850624548993706027877887352631640240466658323",
    "5",
    "1250920374157260975352227630228177503808885970238776755589787667992397801644",
    "8",
    "9268750356330487353851625658018196733360444785989629409262459104413224659042",
    "13",
    "13795834510122633581296910149995637405625304893786359380617673775485765557649",
    "21",
    "91255014789166369597717561768512284961282717243299459087117686166970727286",
    "34",
    "19044458151952122174081266977819687909017942697553052334181622020172075989186",
    "55",
    "9081567416765402784526259883775816694088053926072873148470047536601399007151",
    "89",
    "7397102711100226531080959533356240960762606717855378675464928075327512109709",
    "144",
    "8769577039180267737118834959879535719373864238664784823189101445667032495675",
    "233",
    "18313534207715988974079866502695335562558788800641796079515729557776845196598",
    "377",
    "3307998818443504547147080446242603579171985572374516159168133167731509728340",
    "610",
    "6909797442482908571147555484888694775566591863006449210593380497691743098662",
    "987",
    "15188782283357152618008078794998867895572833466942250863149730297708700904900",
]

BLOCK_EXPECTED = {
    0: "1",
    1: "2",
    2: "3",
    3: "4",
    4: "5",
    5: "6",
    6: "7",
    7: "8",
    8: "12199744136350215368893260239437927912690930103873125685655434110751806988426",
    9: "2511245400861155515540114733618580736833495807330217027612664034927805481235",
    10: "14710989537211370884433374973056508649524425911203342713268098145679612469661",
    11: "5022490801722311031080229467237161473666991614660434055225328069855610962470",
    12: "17222234938072526399973489706675089386357921718533559740880762180607417950896",
    13: "7533736202583466546620344200855742210500487421990651082837992104783416443705",
    14: "19733480338933681915513604440293670123191417525863776768493426215535223432131",
    15: "10044981603444622062160458934474322947333983229320868110450656139711221924940",
    240: "987",
    241: "1974",
    242: "2961",
    243: "3948",
    244: "4935",
    245: "5922",
    246: "6909",
    247: "7896",
    248: "15188782283357152618008078794998867895572833466942250863149730297708700904900",
    249: "8489321694875030013769751844740460702597302533468467382601256408841593314183",
    250: "1789861106392907409531424894482053509621771599994683902052782519974485723466",
    251: "16978643389750060027539503689480921405194605066936934765202512817683186628366",
    252: "10279182801267937423301176739222514212219074133463151284654038928816079037649",
    253: "3579722212785814819062849788964107019243543199989367804105565039948971446932",
    254: "18768504496142967437070928583962974914816376666931618667255295337657672351832",
    255: "12069043907660844832832601633704567721840845733457835186706821448790564761115",
}


def _fib_block(ncols):
    a = [0] * (FFT_SIZE * ncols)
    for i in range(2):
        for j in range(ncols):
            a[i * ncols + j] = 1 + j
    for i in range(2, FFT_SIZE):
        for j in range(ncols):
            a[i * ncols + j] = (a[ncols * (i - 1) + j] + a[ncols * (i - 2) + j]) % FR_MODULUS
    return a


def test_ntt_round_trip():
    ntt = NTT(FFT_SIZE)
    a = [1] * FFT_SIZE
    initial = list(a)
    for _ in range(NUM_REPS):
        a = ntt.ntt(a, FFT_SIZE)
        a = ntt.intt(a, FFT_SIZE)
    assert a == initial


def test_ntt_block_round_trip_default_settings():
    ntt = NTT(FFT_SIZE)
    a = _fib_block(NUM_COLUMNS)
    initial = list(a)
    for _ in range(NUM_REPS):
        a = ntt.ntt(a, FFT_SIZE, NUM_COLUMNS)
        a = ntt.intt(a, FFT_SIZE, NUM_COLUMNS)
    assert a == initial


def test_ntt_block_does_not_modify_source():
    ntt = NTT(FFT_SIZE)
    a = _fib_block(NUM_COLUMNS)
    initial = list(a)
    transformed = ntt.ntt(a, FFT_SIZE, NUM_COLUMNS)
    assert a == initial
    assert ntt.intt(transformed, FFT_SIZE, NUM_COLUMNS) == initial


@pytest.mark.parametrize(
    "forward, backward",
    [((3, 5), (4, 3)), ((3, 3000), (4, -1)), ((1, 1), (10, 8)), ((0, 2), (2, 0))],
)
def test_ntt_block_phases_and_blocks(forward, backward):
    ntt = NTT(FFT_SIZE)
    a = _fib_block(NUM_COLUMNS)
    initial = list(a)
    for _ in range(NUM_REPS):
        a = ntt.ntt(a, FFT_SIZE, NUM_COLUMNS, *forward)
        a = ntt.intt(a, FFT_SIZE, NUM_COLUMNS, *backward)
    assert a == initial


def test_ntt_phases_and_blocks_do_not_change_result():
    ntt = NTT(FFT_SIZE)
    a = _fib_block(NUM_COLUMNS)
    reference = ntt.ntt(a, FFT_SIZE, NUM_COLUMNS)
    assert ntt.ntt(a, FFT_SIZE, NUM_COLUMNS, 4, 3) == reference
    assert ntt.ntt(a, FFT_SIZE, NUM_COLUMNS, 1, 8) == reference


def test_ntt_size_one_three_columns():
    ntt = NTT(FFT_SIZE)
    a1 = [1, 2, 3]
    b1 = ntt.ntt(a1, 1, 3)
    assert ntt.intt(b1, 1, 3) == [1, 2, 3]


def test_ntt_size_two_three_columns():
    ntt = NTT(FFT_SIZE)
    a2 = [1, 2, 3, 4, 5, 6]
    b2 = ntt.ntt(a2, 2, 3)
    assert ntt.intt(b2, 2, 3) == [1, 2, 3, 4, 5, 6]


def test_ntt_empty_sizes_leave_data_untouched():
    ntt = NTT(FFT_SIZE)
    a2 = [1, 2, 3, 4, 5, 6]
    assert ntt.ntt(a2, 0, 3) == a2
    assert ntt.intt(a2, 0, 3) == a2
    assert ntt.ntt(a2, 1, 0) == a2
    assert ntt.intt(a2, 1, 0) == a2


def test_lde():
    ntt = NTT(FFT_SIZE)
    extension = NTT(FFT_SIZE << BLOWUP_FACTOR)
    a = [1, 1]
    for i in range(2, FFT_SIZE):
        a.append(a[i - 1] + a[i - 2])
    coefs = ntt.intt(a, FFT_SIZE)
    coefs += [0] * ((FFT_SIZE << BLOWUP_FACTOR) - FFT_SIZE)
    result = extension.ntt(coefs, FFT_SIZE << BLOWUP_FACTOR)
    assert [str(v) for v in result] == LDE_EXPECTED


def test_lde_block():
    ntt = NTT(FFT_SIZE)
    extension = NTT(FFT_SIZE << BLOWUP_FACTOR)
    a = _fib_block(NUM_COLUMNS)
    coefs = ntt.intt(a, FFT_SIZE, NUM_COLUMNS, NPHASES)
    coefs += [0] * ((FFT_SIZE << BLOWUP_FACTOR) * NUM_COLUMNS - len(coefs))
    result = extension.ntt(coefs, FFT_SIZE << BLOWUP_FACTOR, NUM_COLUMNS, NUM_PHASES)
    for index, expected in BLOCK_EXPECTED.items():
        assert str(result[index]) == expected


def test_extend_pol():
    ntt = NTT(FFT_SIZE)
    a = _fib_block(NUM_COLUMNS)
    result = ntt.extend_pol(a, FFT_SIZE << BLOWUP_FACTOR, FFT_SIZE, NUM_COLUMNS)
    assert len(result) == (FFT_SIZE << BLOWUP_FACTOR) * NUM_COLUMNS
    for index, expected in BLOCK_EXPECTED.items():
        assert str(result[index]) == expected


def test_root_has_exact_order():
    ntt = NTT(FFT_SIZE)
    w = ntt.root(4, 1)
    assert pow(w, 16, FR_MODULUS) == 1
    assert pow(w, 8, FR_MODULUS) == FR_MODULUS - 1
    assert ntt.root(0, 0) == 1
    assert ntt.root(1, 1) == FR_MODULUS - 1
    assert ntt.root(3, 1) == ntt.root(4, 2)


def test_root_beyond_domain_raises():
    ntt = NTT(FFT_SIZE)
    with pytest.raises(ValueError):
        ntt.root(5, 1)


def test_forward_transform_of_delta_gives_powers_of_root():
    ntt = NTT(4)
    result = ntt.ntt([0, 1, 0, 0], 4)
    assert result == [ntt.root(2, k) for k in range(4)]


def test_forward_transform_of_constant():
    ntt = NTT(4)
    assert ntt.ntt([5, 5, 5, 5], 4) == [20, 0, 0, 0]


def test_reverse_permutation_single_column():
    ntt = NTT(8)
    assert ntt.reverse_permutation([10, 11, 12, 13], 4, 0, 1, 1) == [10, 12, 11, 13]


def test_reverse_permutation_column_offset():
    ntt = NTT(8)
    src = [0, 1, 2, 3, 4, 5, 6, 7]
    assert ntt.reverse_permutation(src, 4, 1, 1, 2) == [1, 5, 3, 7]


def test_reverse_permutation_with_extension_zeroes_upper_rows():
    ntt = NTT(8, 2)
    assert ntt.reverse_permutation([10, 11], 4, 0, 1, 1) == [10, 0, 11, 0]


def test_reverse_permutation_short_source_raises():
    ntt = NTT(8)
    with pytest.raises(ValueError):
        ntt.reverse_permutation([1, 2], 4, 0, 1, 1)


def test_size_not_power_of_two_raises():
    ntt = NTT(FFT_SIZE)
    with pytest.raises(ValueError):
        ntt.ntt([1, 2, 3], 3)


def test_size_beyond_maximum_raises():
    ntt = NTT(4)
    with pytest.raises(ValueError):
        ntt.ntt([1] * 8, 8)


def test_domain_too_big_for_curve():
    with pytest.raises(ValueError, match="too big"):
        NTT(1 << 29)